# SPDX-License-Identifier: MIT

# ANSI 256-color palette indexes
BLUE = 4
GREEN = 2
GREY = 246
HOTPINK = 198
LIGHTORANGE = 215
LIME = 154
TAN = 179
TURQUOISE = 37

# Color constant for completed tasks
COMPLETED_TASK_COLOR = GREY
