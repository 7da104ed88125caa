from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


def scope_style(is_scoped: bool) -> str:
    return UIStyle.CYAN.value if is_scoped else UIStyle.YELLOW.value
