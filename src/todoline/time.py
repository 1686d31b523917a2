# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def date_from_str_optional(value: str) -> Optional[pendulum.Date]:
    """Parse a strict YYYY-MM-DD string, returning None when it is not a real date."""
    match = DATE_PATTERN.match(value)
    if match is None:
        return None
    try:
        return pendulum.date(
            int(match.group(1)), int(match.group(2)), int(match.group(3))
        )
    except ValueError:
        return None


def today_str() -> str:
    return pendulum.today().to_date_string()
