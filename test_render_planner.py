import unittest

from app_state import AppState, InputMode
from chart_model import BARS, Bar, Bounds, CategorySeries, LineSeries
from render_planner import (
    CHART_TITLE,
    PLACEHOLDER,
    BarChart,
    LineChart,
    Rect,
    plan_frame,
    split_regions,
)


class SplitRegionsTests(unittest.TestCase):
    def test_regions_stack_inside_margin(self):
        help_r, box_r, status_r, chart_r = split_regions(80, 24)
        self.assertEqual(help_r, Rect(2, 2, 76, 1))
        self.assertEqual(box_r, Rect(2, 3, 76, 3))
        self.assertEqual(status_r, Rect(2, 6, 76, 3))
        self.assertEqual(chart_r, Rect(2, 9, 76, 13))

    def test_tiny_terminal_clips_without_negative_sizes(self):
        regions = split_regions(3, 6)
        for r in regions:
            self.assertGreaterEqual(r.width, 0)
            self.assertGreaterEqual(r.height, 0)
        self.assertEqual([r.height for r in regions], [1, 1, 0, 0])


class PlanFrameTests(unittest.TestCase):
    def test_normal_mode_plan(self):
        state = AppState()
        plan = plan_frame(state, 80, 24)

        self.assertEqual(plan.help.text, "Press q to exit, e to start editing.")
        self.assertTrue(plan.help.blink)
        bold = [s.text for s in plan.help.spans if s.bold]
        self.assertEqual(bold, ["q", "e"])

        self.assertIsNone(plan.cursor)
        self.assertFalse(plan.path_box.highlighted)
        self.assertEqual(plan.status.text, PLACEHOLDER)
        self.assertFalse(plan.status.alert)

        self.assertIsInstance(plan.chart, LineChart)
        self.assertEqual(plan.chart.title, CHART_TITLE)
        self.assertEqual(plan.chart.bounds, Bounds(0.0, 10.0, 0.0, 10.0))
        self.assertEqual(plan.chart.points, [])

    def test_editing_mode_plan_places_cursor_after_text(self):
        state = AppState()
        state.mode = InputMode.EDITING
        state.path_buffer = "data.csv"
        plan = plan_frame(state, 80, 24)

        bold = [s.text for s in plan.help.spans if s.bold]
        self.assertEqual(bold, ["Esc", "Enter"])
        self.assertFalse(plan.help.blink)
        self.assertTrue(plan.path_box.highlighted)
        self.assertEqual(plan.path_box.text, "data.csv")
        box = plan.path_box.area
        self.assertEqual(plan.cursor, (box.x + len("data.csv") + 1, box.y + 1))

    def test_error_is_shown_as_alert(self):
        state = AppState()
        state.last_error = "Error: No valid data found in CSV"
        plan = plan_frame(state, 80, 24)
        self.assertTrue(plan.status.alert)
        self.assertEqual(plan.status.text, state.last_error)

    def test_line_chart_carries_bounds_and_points(self):
        state = AppState()
        state.series = LineSeries.from_records([(1, 2), (3, 4), (5, 6)])
        plan = plan_frame(state, 80, 24)
        self.assertEqual(plan.chart.bounds, Bounds(1.0, 5.0, 2.0, 6.0))
        self.assertEqual(plan.chart.points, [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)])

    def test_bar_chart_carries_bars_and_colors(self):
        state = AppState(BARS)
        state.series = CategorySeries.from_records([("a", 3), ("b", 7), ("c", 1)])
        plan = plan_frame(state, 80, 24)
        self.assertIsInstance(plan.chart, BarChart)
        self.assertEqual(
            plan.chart.bars, [Bar("a", 3, 0), Bar("b", 7, 1), Bar("c", 1, 2)]
        )
        self.assertEqual(plan.chart.max_value, 7)

    def test_planning_does_not_touch_state(self):
        state = AppState()
        state.mode = InputMode.EDITING
        state.path_buffer = "x"
        plan_frame(state, 40, 10)
        self.assertIs(state.mode, InputMode.EDITING)
        self.assertEqual(state.path_buffer, "x")
        self.assertIsNone(state.last_error)


if __name__ == "__main__":
    unittest.main()
