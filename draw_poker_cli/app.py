from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

from draw_poker import GameError, GameSession, Phase
from draw_poker.draw import HAND_SIZE
from draw_poker.logging_utils import LOG_LEVEL, setup_logging
from draw_poker_cli.display import (
    CURSOR_MARK,
    WELCOME_TEXT,
    card_label,
    hand_str,
    result_line,
    score_text,
    status_text,
    tutorial_text,
)
from draw_poker_cli.styles import APP_CSS

try:
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Button, Footer, Header, RichLog, Static, TabbedContent, TabPane
except ImportError as exc:
    raise SystemExit(
        "Textual is required for this interface. Install it with: python3 -m pip install textual"
    ) from exc

logger = logging.getLogger(__name__)


class DrawPokerTUI(App[None]):
    """Textual front-end for a single-player draw poker session."""

    CSS = APP_CSS
    TITLE = "Single Player Poker"
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("enter", "primary", "Deal/Confirm"),
        Binding("space", "toggle_cursor", "Mark"),
        Binding("c", "clear", "Clear"),
        Binding("h", "show_tab('home')", "Home"),
        Binding("p", "show_tab('poker')", "Poker"),
        Binding("t", "show_tab('tutorial')", "Tutorial"),
        Binding("up", "move_cursor(-1)", "Up", show=False),
        Binding("down", "move_cursor(1)", "Down", show=False),
        Binding("left", "move_cursor(-1)", "Left", show=False),
        Binding("right", "move_cursor(1)", "Right", show=False),
    ] + [Binding(str(i + 1), f"toggle({i})", f"Mark {i + 1}", show=False) for i in range(HAND_SIZE)]

    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.session = GameSession(rng=random.Random(seed))
        self.cursor = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial="home", id="tabs"):
            with TabPane("Home", id="home"):
                yield Static(WELCOME_TEXT, id="welcome")
            with TabPane("Poker", id="poker"):
                with Horizontal(id="layout"):
                    with Vertical(id="left_col"):
                        yield Static(id="status")
                        yield Static(id="score")
                        yield RichLog(id="log", highlight=False, markup=False, auto_scroll=True)
                    with Vertical(id="center_col"):
                        yield Static("Your Hand", id="hand_title")
                        with Horizontal(id="hand_row"):
                            for i in range(HAND_SIZE):
                                yield Button("", id=f"card-{i}", classes="card")
                        with Horizontal(id="cursor_row"):
                            for i in range(HAND_SIZE):
                                yield Static(" ", id=f"cursor-{i}", classes="cursor-slot")
                        with Horizontal(id="controls"):
                            yield Button("Deal", id="deal", classes="control")
                            yield Button("Confirm", id="confirm", classes="control")
                            yield Button("Clear", id="clear", classes="control")
            with TabPane("Tutorial", id="tutorial"):
                yield Static(tutorial_text(), id="tutorial_text")
        yield Footer()

    def on_mount(self) -> None:
        # Keys belong to the app; nothing should grab focus and swallow them.
        for widget in self.query(Button):
            widget.can_focus = False
        self.query_one("#log", RichLog).can_focus = False
        self._refresh_all()
        self._log(f"Run seed: {self.seed}")
        logger.info("Session started with seed %d", self.seed)

    def _log(self, message: str) -> None:
        self.query_one("#log", RichLog).write(message)

    def _refresh_all(self) -> None:
        """Redraw every visible panel from the session state."""
        self._refresh_status()
        self._refresh_hand_buttons()
        self._refresh_cursor()
        self._refresh_controls()

    def _refresh_status(self) -> None:
        self.query_one("#status", Static).update(status_text(self.session))
        self.query_one("#score", Static).update(score_text(self.session))

    def _refresh_hand_buttons(self) -> None:
        hand = self.session.hand or []
        selection = self.session.selection
        for i in range(HAND_SIZE):
            btn = self.query_one(f"#card-{i}", Button)
            btn.remove_class("selected")
            if i < len(hand):
                btn.label = card_label(hand[i], i in selection)
                btn.disabled = False
                if i in selection:
                    btn.add_class("selected")
            else:
                btn.label = "--"
                btn.disabled = True

    def _refresh_cursor(self) -> None:
        dealt = self.session.phase is Phase.DEALT
        for i in range(HAND_SIZE):
            slot = self.query_one(f"#cursor-{i}", Static)
            slot.remove_class("cursor-on")
            if dealt and i == self.cursor:
                slot.update(CURSOR_MARK)
                slot.add_class("cursor-on")
            else:
                slot.update(" ")

    def _refresh_controls(self) -> None:
        dealt = self.session.phase is Phase.DEALT
        self.query_one("#deal", Button).disabled = dealt
        self.query_one("#confirm", Button).disabled = not dealt
        self.query_one("#clear", Button).disabled = not dealt

    def action_show_tab(self, tab: str) -> None:
        self.query_one("#tabs", TabbedContent).active = tab

    def action_primary(self) -> None:
        if self.session.phase is Phase.IDLE:
            self.action_deal()
        else:
            self.action_commit()

    def action_deal(self) -> None:
        self.action_show_tab("poker")
        try:
            hand = self.session.deal()
        except GameError as exc:
            self._log(f"Cannot deal: {exc}")
            return
        self.cursor = 0
        self._log(f"=== Round {self.session.rounds + 1} ===")
        self._log(f"Dealt {hand_str(hand)}")
        self._refresh_all()

    def action_commit(self) -> None:
        swapped = len(self.session.selection)
        try:
            self.session.commit()
        except GameError as exc:
            self._log(f"Cannot confirm: {exc}")
            return
        if swapped:
            self._log(f"You replaced {swapped} card(s).")
        result = self.session.last_result
        if result is not None:
            self._log(result_line(result))
        self._refresh_all()

    def action_toggle(self, index: int) -> None:
        try:
            self.session.toggle_select(index)
        except GameError as exc:
            self._log(f"Cannot mark card: {exc}")
            return
        self.cursor = index
        self._refresh_all()

    def action_toggle_cursor(self) -> None:
        self.action_toggle(self.cursor)

    def action_move_cursor(self, delta: int) -> None:
        self.cursor = (self.cursor + delta) % HAND_SIZE
        self._refresh_cursor()

    def action_clear(self) -> None:
        try:
            self.session.clear_selection()
        except GameError as exc:
            self._log(f"Nothing to clear: {exc}")
            return
        self._refresh_all()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("card-"):
            self.action_toggle(int(button_id.split("-")[1]))
        elif button_id == "deal":
            self.action_deal()
        elif button_id == "confirm":
            self.action_commit()
        elif button_id == "clear":
            self.action_clear()


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse CLI arguments for a TUI session."""
    p = argparse.ArgumentParser(description="Play single-player five-card draw poker in a Textual TUI.")
    p.add_argument("--seed", type=int, default=None, help="Optional deterministic seed. Default: random each run.")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Python log level (default: LOG_LEVEL env var, else WARNING).",
    )
    p.add_argument("--log-file", type=str, default=None, help="Write the Python log to this file.")
    return p.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    DrawPokerTUI(seed=args.seed).run()


if __name__ == "__main__":
    main()
