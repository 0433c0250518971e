from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    LINE_START = auto()
    LINE_END = auto()
    SORT_ASC = auto()
    SORT_DESC = auto()
    RESTORE_ORDER = auto()
    SEARCH_START = auto()
    CHAR = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    SPACE = auto()
    QUIT = auto()
    RESIZE = auto()


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""

    @classmethod
    def of_char(cls, ch: str):
        return cls(Key.CHAR, ch)
