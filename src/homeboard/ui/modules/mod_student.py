"""Student module -- see the class's homework and tick items off."""

from __future__ import annotations

from shiny import module, reactive, render, ui

from homeboard.core.config import BoardConfig
from homeboard.core.state import BoardState
from homeboard.homework.urgency import annotate
from homeboard.homework.views import student_view


@module.ui
def student_ui(config: BoardConfig):
    return ui.layout_sidebar(
        ui.sidebar(
            ui.input_text("student_name", "Your Name", placeholder="First and last name"),
            ui.input_select("class_level", "Class", choices=config.class_levels),
            ui.input_switch("hide_completed", "Hide completed", value=False),
            width=280,
        ),
        ui.output_ui("checklist"),
    )


@module.server
def student_server(input, output, session, board: BoardState, config: BoardConfig, changed):
    # Ids offered by the checkbox group at its last render
    rendered_ids: reactive.Value[list[str]] = reactive.value([])

    @reactive.calc
    def visible():
        changed()
        return student_view(
            board.homeworks,
            board.progress,
            class_level=input.class_level(),
            student_name=input.student_name().strip(),
            hide_completed=input.hide_completed(),
        )

    @render.ui
    def checklist():
        name = input.student_name().strip()
        if not name:
            return ui.p("Enter your name to track your homework.", class_="text-muted")
        items = annotate(visible())
        rendered_ids.set([hw.id for hw, _ in items])
        if not items:
            return ui.p("Nothing to do for this class.", class_="text-muted")

        choices = {
            hw.id: ui.span(
                ui.tags.span(status.description, class_=f"badge bg-{status.tier} me-2"),
                ui.tags.strong(hw.title),
                ui.tags.span(f" {hw.subject}", class_="text-muted"),
                ui.tags.a(" link", href=hw.link, target="_blank") if hw.link else "",
            )
            for hw, status in items
        }
        selected = [hw.id for hw, _ in items if board.is_done(name, hw.id)]
        return ui.input_checkbox_group("done", None, choices=choices, selected=selected)

    @reactive.effect
    @reactive.event(input.done, ignore_none=False)
    def _sync_done():
        name = input.student_name().strip()
        if not name:
            return
        selected = set(input.done() or ())
        for homework_id in rendered_ids():
            wanted = homework_id in selected
            if board.is_done(name, homework_id) != wanted:
                board.toggle_completion(name, homework_id, wanted)
