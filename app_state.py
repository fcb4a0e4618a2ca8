from enum import Enum

from chart_model import LINE, empty_series


class InputMode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


class AppState:
    def __init__(self, variant=LINE, path_buffer=""):
        self.variant = variant
        self.mode = InputMode.NORMAL
        self.path_buffer = path_buffer
        self.series = empty_series(variant)
        self.last_error: str | None = None
        self.running = True

    @property
    def editing(self) -> bool:
        return self.mode is InputMode.EDITING

    def quit(self):
        self.running = False
