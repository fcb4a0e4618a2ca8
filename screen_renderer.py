import curses

from render_planner import BarChart, FramePlan, LineChart, Rect


POINT_GLYPH = "•"
SEGMENT_GLYPH = "·"
BAR_GLYPH = "█"
BAR_GAP = 1
MAX_BAR_WIDTH = 9


def scale_to_cells(value, lo, hi, cells):
    """Map value in [lo, hi] onto 0..cells-1; a zero-width range maps to the middle."""
    if cells <= 1:
        return 0
    span = hi - lo
    if span == 0:
        return (cells - 1) // 2
    pos = round((value - lo) / span * (cells - 1))
    return max(0, min(cells - 1, pos))


def segment_cells(start, end):
    """Cells on the straight line between two (col, row) cells, both ends included."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    cells = []
    while True:
        cells.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return cells


def bar_width(count, width):
    if count <= 0:
        return 0
    return max(1, min(MAX_BAR_WIDTH, (width + BAR_GAP) // count - BAR_GAP))


def format_tick(value):
    return f"{value:g}"


class ScreenRenderer:
    PAIR_EDIT = 1
    PAIR_ALERT = 2
    PAIR_AXIS = 3
    PAIR_SERIES = 4
    PAIR_BAR_BASE = 10
    BAR_COLORS = (
        curses.COLOR_CYAN,
        curses.COLOR_GREEN,
        curses.COLOR_YELLOW,
        curses.COLOR_MAGENTA,
        curses.COLOR_BLUE,
        curses.COLOR_RED,
    )

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._colors = False
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_EDIT, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_ALERT, curses.COLOR_RED, -1)
            curses.init_pair(self.PAIR_AXIS, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_SERIES, curses.COLOR_CYAN, -1)
            for i, color in enumerate(self.BAR_COLORS):
                curses.init_pair(self.PAIR_BAR_BASE + i, color, -1)
            self._colors = True
        except curses.error:
            pass

    def size(self):
        h, w = self.stdscr.getmaxyx()
        return w, h

    def draw(self, plan: FramePlan):
        win = self.stdscr
        win.erase()

        self._draw_help(plan.help)
        self._draw_path_box(plan.path_box)
        self._draw_status(plan.status)
        if isinstance(plan.chart, BarChart):
            self._draw_bar_chart(plan.chart)
        else:
            self._draw_line_chart(plan.chart)

        try:
            if plan.cursor is not None:
                curses.curs_set(1)
                x, y = plan.cursor
                win.move(y, x)
            else:
                curses.curs_set(0)
        except curses.error:
            pass
        win.refresh()

    # ---------- primitives ----------
    def _pair(self, pair):
        return curses.color_pair(pair) if self._colors else 0

    def _put(self, y, x, text, attr=0, max_w=None):
        if not text:
            return
        if max_w is None:
            _, w = self.stdscr.getmaxyx()
            max_w = w - x
        if max_w <= 0:
            return
        try:
            self.stdscr.addnstr(y, x, text, max_w, attr)
        except curses.error:
            pass

    def _box(self, area: Rect, title="", attr=0):
        if area.width < 2 or area.height < 2:
            return
        win = self.stdscr
        right = area.x + area.width - 1
        bottom = area.y + area.height - 1
        try:
            win.hline(area.y, area.x + 1, curses.ACS_HLINE | attr, area.width - 2)
            win.hline(bottom, area.x + 1, curses.ACS_HLINE | attr, area.width - 2)
            win.vline(area.y + 1, area.x, curses.ACS_VLINE | attr, area.height - 2)
            win.vline(area.y + 1, right, curses.ACS_VLINE | attr, area.height - 2)
            win.addch(area.y, area.x, curses.ACS_ULCORNER | attr)
            win.addch(area.y, right, curses.ACS_URCORNER | attr)
            win.addch(bottom, area.x, curses.ACS_LLCORNER | attr)
            # writing the bottom-right cell of the screen raises after drawing
            win.addch(bottom, right, curses.ACS_LRCORNER | attr)
        except curses.error:
            pass
        if title:
            self._put(area.y, area.x + 1, title, attr | curses.A_BOLD, area.width - 2)

    # ---------- panels ----------
    def _draw_help(self, help_line):
        area = help_line.area
        if area.height < 1:
            return
        base = curses.A_BLINK if help_line.blink else 0
        x = area.x
        limit = area.x + area.width
        for span in help_line.spans:
            attr = base | (curses.A_BOLD if span.bold else 0)
            self._put(area.y, x, span.text, attr, limit - x)
            x += len(span.text)
            if x >= limit:
                break

    def _draw_path_box(self, box):
        area = box.area
        attr = self._pair(self.PAIR_EDIT) if box.highlighted else 0
        self._box(area, box.title, attr)
        if area.height >= 3:
            self._put(area.y + 1, area.x + 1, box.text, attr, area.width - 2)

    def _draw_status(self, status):
        area = status.area
        if area.height < 1:
            return
        attr = self._pair(self.PAIR_ALERT) if status.alert else 0
        self._put(area.y, area.x, status.text, attr, area.width)

    def _draw_line_chart(self, chart: LineChart):
        area = chart.area
        self._box(area, chart.title)
        inner = Rect(area.x + 1, area.y + 1, area.width - 2, area.height - 2)
        if inner.width < 4 or inner.height < 3:
            return

        axis_attr = self._pair(self.PAIR_AXIS)
        bounds = chart.bounds
        y_hi = format_tick(bounds.y_max)
        y_lo = format_tick(bounds.y_min)
        label_w = max(len(y_hi), len(y_lo), len(chart.y_title))

        axis_col = inner.x + label_w
        plot_left = axis_col + 1
        plot_w = inner.x + inner.width - plot_left
        label_row = inner.y + inner.height - 1
        axis_row = label_row - 1
        plot_top = inner.y
        plot_h = axis_row - plot_top
        if plot_w < 1 or plot_h < 1:
            return

        win = self.stdscr
        try:
            win.vline(plot_top, axis_col, curses.ACS_VLINE | axis_attr, plot_h)
            win.hline(axis_row, plot_left, curses.ACS_HLINE | axis_attr, plot_w)
            win.addch(axis_row, axis_col, curses.ACS_LLCORNER | axis_attr)
        except curses.error:
            pass

        self._put(plot_top, inner.x, y_hi.rjust(label_w), axis_attr, label_w)
        self._put(axis_row - 1, inner.x, y_lo.rjust(label_w), axis_attr, label_w)
        self._put(plot_top + plot_h // 2, inner.x, chart.y_title.rjust(label_w), axis_attr | curses.A_BOLD, label_w)

        x_lo = format_tick(bounds.x_min)
        x_hi = format_tick(bounds.x_max)
        self._put(label_row, plot_left, x_lo, axis_attr, plot_w)
        x_hi_col = max(plot_left + len(x_lo) + 1, plot_left + plot_w - len(x_hi) - len(chart.x_title) - 1)
        self._put(label_row, x_hi_col, x_hi, axis_attr, plot_left + plot_w - x_hi_col)
        self._put(label_row, plot_left + plot_w - len(chart.x_title), chart.x_title, axis_attr | curses.A_BOLD)

        cells = [
            (
                plot_left + scale_to_cells(x, bounds.x_min, bounds.x_max, plot_w),
                axis_row - 1 - scale_to_cells(y, bounds.y_min, bounds.y_max, plot_h),
            )
            for x, y in chart.points
        ]
        series_attr = self._pair(self.PAIR_SERIES)
        for start, end in zip(cells, cells[1:]):
            for col, row in segment_cells(start, end)[1:-1]:
                self._put(row, col, SEGMENT_GLYPH, series_attr, 1)
        for col, row in cells:
            self._put(row, col, POINT_GLYPH, series_attr, 1)

    def _draw_bar_chart(self, chart: BarChart):
        area = chart.area
        self._box(area, chart.title)
        inner = Rect(area.x + 1, area.y + 1, area.width - 2, area.height - 2)
        if inner.width < 1 or inner.height < 3 or not chart.bars:
            return

        label_row = inner.y + inner.height - 1
        base_row = label_row - 1
        # keep one row above the tallest bar for its value
        bar_space = inner.height - 2
        bw = bar_width(len(chart.bars), inner.width)

        for i, bar in enumerate(chart.bars):
            left = inner.x + i * (bw + BAR_GAP)
            if left + bw > inner.x + inner.width:
                break
            attr = self._pair(self.PAIR_BAR_BASE + bar.color_index)
            if chart.max_value > 0:
                height = round(bar.value / chart.max_value * bar_space)
            else:
                height = 0
            for level in range(height):
                self._put(base_row - level, left, BAR_GLYPH * bw, attr, bw)
            value_text = str(bar.value)[:bw]
            self._put(base_row - height, left + (bw - len(value_text)) // 2, value_text, attr | curses.A_BOLD, bw)
            label = bar.label[:bw]
            self._put(label_row, left + (bw - len(label)) // 2, label, 0, bw)
