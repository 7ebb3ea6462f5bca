#!/usr/bin/env python3
"""habitrack TUI — interactive terminal habit tracker powered by Textual."""

from __future__ import annotations

import logging

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Input, Label, Static

from core import (
    HabitError,
    Registry,
    SaveError,
    add_habit,
    habit_choices,
    heatmap,
    load_registry,
    load_settings,
    log_path,
    mark_done,
    save_registry,
    select_habit,
    summarize,
    today,
    window_dates,
)

logger = logging.getLogger("habitrack")

DONE = "■"
MISS = "□"


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#main-pane {
    height: 1fr;
    padding: 0 1;
}

.section-title {
    text-style: bold;
    color: $text;
    margin: 1 0 0 0;
    padding: 0 1;
}

#message {
    height: auto;
    padding: 0 1;
    color: $text-muted;
}

#habit-table {
    height: 1fr;
}

#prompt {
    dock: bottom;
    display: none;
    margin: 0 1;
}
"""


# ── Main app ───────────────────────────────────────────────────


class HabitrackApp(App):
    """habitrack — interactive terminal habit tracker."""

    TITLE = "Habit Tracker"
    CSS = CSS
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("a", "add_habit", "Add"),
        Binding("m", "mark_today", "Mark today"),
        Binding("l", "show_list", "List"),
        Binding("h", "show_heatmap", "Heatmap"),
        Binding("s", "save", "Save"),
        Binding("escape", "cancel_prompt", "Cancel", show=False),
        Binding("q", "quit_app", "Save & Quit"),
        Binding("ctrl+q", "quit_app", "Save & Quit", show=False, priority=True),
    ]

    current_view: reactive[str] = reactive("list")

    def __init__(self) -> None:
        super().__init__()
        self.settings = load_settings()
        self.registry = Registry()
        self._pending: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Label("Habits", id="view-title", classes="section-title"),
            Static(id="message"),
            DataTable(id="habit-table", cursor_type="row"),
            id="main-pane",
        )
        yield Input(id="prompt")
        yield Footer()

    def on_mount(self) -> None:
        self.registry, error = load_registry()
        if error is not None:
            self.notify(str(error), title="Load failed", severity="error")
        self.action_show_list()

    # ── Views ──────────────────────────────────────────────────

    def _set_view(self, title: str, message: str = "") -> DataTable:
        self.query_one("#view-title", Label).update(title)
        self.query_one("#message", Static).update(message)
        table = self.query_one("#habit-table", DataTable)
        table.clear(columns=True)
        return table

    def action_show_list(self) -> None:
        self.current_view = "list"
        if not len(self.registry):
            self._set_view("Habits", "No habits yet.")
            return
        table = self._set_view("Habits")
        table.add_columns("Habit", "Days", "Streak", "BestStreak")
        for row in summarize(self.registry, today(self.settings)):
            table.add_row(row.name, str(row.days), str(row.current_streak), str(row.best_streak))

    def action_show_heatmap(self) -> None:
        self.current_view = "heatmap"
        window = self.settings.heatmap_window
        title = f"Last {window} days ({DONE} = done, {MISS} = miss)"
        if not len(self.registry):
            self._set_view(title, "No habits yet.")
            return
        ref = today(self.settings)
        table = self._set_view(title)
        table.add_columns("Habit", *(str(d.day) for d in window_dates(ref, window)))
        for name, flags in heatmap(self.registry, ref, window).items():
            table.add_row(name, *(DONE if f else MISS for f in flags))

    def _refresh_view(self) -> None:
        if self.current_view == "heatmap":
            self.action_show_heatmap()
        else:
            self.action_show_list()

    # ── Prompted commands ──────────────────────────────────────

    def _open_prompt(self, pending: str, placeholder: str) -> None:
        self._pending = pending
        prompt = self.query_one("#prompt", Input)
        prompt.value = ""
        prompt.placeholder = placeholder
        prompt.display = True
        prompt.focus()

    def _close_prompt(self) -> None:
        self._pending = None
        prompt = self.query_one("#prompt", Input)
        prompt.display = False
        self.set_focus(None)

    def action_add_habit(self) -> None:
        self._open_prompt("add", "Habit name")

    def action_mark_today(self) -> None:
        if not len(self.registry):
            self.notify("No habits yet.", severity="warning")
            return
        self.query_one("#message", Static).update("\n".join(habit_choices(self.registry)))
        self._open_prompt("mark", f"Select (1-{len(self.registry)})")

    def action_cancel_prompt(self) -> None:
        if self._pending is not None:
            self._close_prompt()
            self._refresh_view()

    @on(Input.Submitted, "#prompt")
    def _on_prompt_submitted(self, event: Input.Submitted) -> None:
        pending = self._pending
        self._close_prompt()
        try:
            if pending == "add":
                name = add_habit(self.registry, event.value)
                self.notify(f"Added: {name}")
            elif pending == "mark":
                name = select_habit(self.registry, event.value)
                day = mark_done(self.registry, name, today(self.settings))
                self.notify(f"Marked {name} for {day.isoformat()}")
        except HabitError as e:
            self.notify(str(e), title="Invalid", severity="error")
        self._refresh_view()

    # ── Persistence ────────────────────────────────────────────

    def _save(self) -> bool:
        try:
            save_registry(self.registry, keep_empty=self.settings.keep_empty_habits)
        except SaveError as e:
            logger.error("%s", e)
            self.notify(str(e), title="Save failed", severity="error")
            return False
        return True

    def action_save(self) -> None:
        if self._save():
            self.notify("Saved.")

    def action_quit_app(self) -> None:
        if self._save():
            self.exit(message="Saved. Bye!")


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    logging.basicConfig(
        filename=str(log_path()),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = HabitrackApp()
    app.run()


if __name__ == "__main__":
    main()
