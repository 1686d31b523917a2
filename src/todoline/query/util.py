# SPDX-License-Identifier: MIT

from todoline.model.sort import SortField, SortKey


def split_instruction(instruction_value: str) -> tuple[str, str]:
    instruction_value = instruction_value.strip()
    instruction_value_list = instruction_value.split(" ")
    instruction = instruction_value_list[0].strip()
    value = instruction_value[len(instruction) :].strip()

    return instruction, value


def parse_sort_instruction(sort_instruction: str) -> SortKey:
    """
    Turn `"<field>"`, `"asc <field>"` or `"desc <field>"` into a sort key.

    Raises:
        ValueError: If the direction or the field name is unknown
    """
    direction, column = split_instruction(sort_instruction)
    if column == "":
        direction, column = "asc", direction
    if direction not in ("asc", "desc"):
        raise ValueError(f"unknown sort direction '{direction}'")
    try:
        field = SortField(column.lower())
    except ValueError:
        valid = ", ".join(field.value for field in SortField)
        raise ValueError(f"unknown sort field '{column}' (valid: {valid})")
    return {"field": field, "reverse": direction == "desc"}
