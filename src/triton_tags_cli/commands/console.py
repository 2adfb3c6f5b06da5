# ANSI colors
RESET = "\033[0m"
BOLD = "\033[1m"

CYAN = "\033[36m"
GREEN = "\033[32m"
RED = "\033[31m"
GREY = "\033[90m"

RULE = GREY + "─────────────────────────────────────────────" + RESET
