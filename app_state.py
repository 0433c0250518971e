from enum import Enum


class Mode(Enum):
    NORMAL = "normal"
    SEARCH_ENTRY = "search_entry"
    EXITING = "exiting"


class AppState:
    """Per-session view state. Everything the state machine mutates apart from the engines."""

    def __init__(self, table, file_path=None):
        self.table = table
        self.file_path = file_path

        self.mode = Mode.NORMAL

        # search entry (transient; discarded on Enter/Esc)
        self.search_buffer = ""
        self.search_column: int | None = None

    @property
    def exiting(self) -> bool:
        return self.mode is Mode.EXITING

    @property
    def text_entry(self) -> bool:
        return self.mode is Mode.SEARCH_ENTRY

    def begin_search(self, column: int):
        self.mode = Mode.SEARCH_ENTRY
        self.search_buffer = ""
        self.search_column = column

    def end_search(self):
        self.mode = Mode.NORMAL
        self.search_buffer = ""
        self.search_column = None
