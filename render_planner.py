"""
Pure layout step: turns the application state into a FramePlan.

The plan only describes what goes where. ScreenRenderer owns every curses
call, so everything here can be checked without a terminal.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from app_state import AppState, InputMode
from chart_model import Bar, Bounds, CategorySeries, LineSeries


MARGIN = 2
HELP_H = 1
PATH_BOX_H = 3
STATUS_H = 3

PATH_BOX_TITLE = "CSV Path"
CHART_TITLE = "Data Chart"
PLACEHOLDER = "Enter a CSV path (e.g., test.csv) and press Enter"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Span:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class HelpLine:
    area: Rect
    spans: Tuple[Span, ...]
    blink: bool = False

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.spans)


@dataclass(frozen=True)
class PathBox:
    area: Rect
    title: str
    text: str
    highlighted: bool
    cursor: Optional[Tuple[int, int]] = None


@dataclass(frozen=True)
class StatusLine:
    area: Rect
    text: str
    alert: bool = False


@dataclass(frozen=True)
class LineChart:
    area: Rect
    title: str
    bounds: Bounds
    points: List[Tuple[float, float]] = field(default_factory=list)
    x_title: str = "X"
    y_title: str = "Y"
    name: str = "data"


@dataclass(frozen=True)
class BarChart:
    area: Rect
    title: str
    bars: List[Bar] = field(default_factory=list)
    max_value: int = 0


@dataclass(frozen=True)
class FramePlan:
    help: HelpLine
    path_box: PathBox
    status: StatusLine
    chart: Union[LineChart, BarChart]

    @property
    def cursor(self) -> Optional[Tuple[int, int]]:
        return self.path_box.cursor


def split_regions(width, height):
    """Margin, then rows of 1, 3 and 3 lines; the chart gets what is left."""
    inner_x = MARGIN
    inner_w = max(0, width - 2 * MARGIN)
    remaining = max(0, height - 2 * MARGIN)
    y = MARGIN

    regions = []
    for wanted in (HELP_H, PATH_BOX_H, STATUS_H):
        h = min(wanted, remaining)
        regions.append(Rect(inner_x, y, inner_w, h))
        y += h
        remaining -= h
    regions.append(Rect(inner_x, y, inner_w, remaining))
    return regions


def _help_line(mode, area):
    if mode is InputMode.NORMAL:
        spans = (
            Span("Press "),
            Span("q", bold=True),
            Span(" to exit, "),
            Span("e", bold=True),
            Span(" to start editing."),
        )
        return HelpLine(area, spans, blink=True)
    spans = (
        Span("Press "),
        Span("Esc", bold=True),
        Span(" to stop editing, "),
        Span("Enter", bold=True),
        Span(" to load the file"),
    )
    return HelpLine(area, spans)


def _path_box(state, area):
    cursor = None
    if state.mode is InputMode.EDITING:
        # past the end of the text, one row below the top border
        cursor = (area.x + len(state.path_buffer) + 1, area.y + 1)
    return PathBox(
        area,
        PATH_BOX_TITLE,
        state.path_buffer,
        highlighted=state.editing,
        cursor=cursor,
    )


def _status_line(state, area):
    if state.last_error:
        return StatusLine(area, state.last_error, alert=True)
    return StatusLine(area, PLACEHOLDER)


def _chart(series, area):
    if isinstance(series, CategorySeries):
        return BarChart(area, CHART_TITLE, series.bars(), series.max_value())
    if isinstance(series, LineSeries):
        return LineChart(area, CHART_TITLE, series.bounds(), series.points())
    raise TypeError(f"No chart layout for {type(series).__name__}")


def plan_frame(state: AppState, width: int, height: int) -> FramePlan:
    help_area, box_area, status_area, chart_area = split_regions(width, height)
    return FramePlan(
        help=_help_line(state.mode, help_area),
        path_box=_path_box(state, box_area),
        status=_status_line(state, status_area),
        chart=_chart(state.series, chart_area),
    )
