import logging

from input_controller import InputController
from render_planner import plan_frame
from screen_renderer import ScreenRenderer


logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Owns the AppState and the main loop.
    Each pass draws the current state, blocks for one key, then applies it.
    """

    def __init__(self, stdscr, state, renderer=None, controller=None):
        self.stdscr = stdscr
        self.state = state
        self.renderer = renderer or ScreenRenderer(stdscr)
        self.controller = controller or InputController(state)

    def redraw(self):
        width, height = self.renderer.size()
        self.renderer.draw(plan_frame(self.state, width, height))

    def run(self):
        self.stdscr.keypad(True)
        while self.state.running:
            self.redraw()
            ch = self.stdscr.get_wch()
            self.controller.handle_key(ch)
        logger.info("Main loop finished")
