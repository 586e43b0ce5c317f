"""Homeboard -- Main Shiny application entry point."""

from __future__ import annotations

import logging

from shiny import App, reactive, ui

from homeboard.core.config import BoardConfig, is_menu_visible, load_config
from homeboard.core.state import BoardState
from homeboard.ui.modules import mod_overview, mod_student, mod_teacher

logger = logging.getLogger(__name__)


def create_app(config: BoardConfig | None = None) -> App:
    """Create the Homeboard Shiny application."""
    if config is None:
        config = load_config()

    visible = {menu for menu in ("teacher", "student", "overview") if is_menu_visible(config, menu)}

    panels = []
    if "teacher" in visible:
        panels.append(ui.nav_panel("Teacher", mod_teacher.teacher_ui("teacher", config)))
    if "student" in visible:
        panels.append(ui.nav_panel("Student", mod_student.student_ui("student", config)))
    if "overview" in visible:
        panels.append(ui.nav_panel("Overview", mod_overview.overview_ui("overview")))

    app_ui = ui.page_navbar(*panels, title=config.school_name, id="main_nav")

    shared: dict[str, BoardState] = {}

    def shared_board() -> BoardState:
        # Opened on first connection; every session writes through this one board
        if "board" not in shared:
            shared["board"] = BoardState.open(config)
            logger.info(
                "Opened board with %d homework from %s", len(shared["board"]), config.storage_dir,
            )
        return shared["board"]

    def server(input, output, session):
        board = shared_board()
        changed = reactive.value(0)
        board.attach_signal(changed)
        session.on_ended(lambda: board.detach_signal(changed))

        if "teacher" in visible:
            mod_teacher.teacher_server("teacher", board=board, config=config, changed=changed)
        if "student" in visible:
            mod_student.student_server("student", board=board, config=config, changed=changed)
        if "overview" in visible:
            mod_overview.overview_server("overview", board=board, config=config, changed=changed)

    return App(app_ui, server)


app = create_app()


def main():
    """CLI entry point."""
    import shiny
    shiny.run_app("homeboard.ui.app:app")


if __name__ == "__main__":
    main()
