"""Teacher module -- assign homework, filter the list, delete entries."""

from __future__ import annotations

from datetime import date

import pandas as pd
from shiny import module, reactive, render, req, ui

from homeboard.core.config import BoardConfig
from homeboard.core.state import BoardState
from homeboard.homework.urgency import annotate
from homeboard.homework.views import teacher_view


def _with_all(values: list[str]) -> dict[str, str]:
    return {"": "All", **{v: v for v in values}}


@module.ui
def teacher_ui(config: BoardConfig):
    today = date.today()
    return ui.layout_sidebar(
        ui.sidebar(
            ui.h5("New Homework"),
            ui.input_text("title", "Title", placeholder="e.g. Worksheet 3"),
            ui.input_select("subject", "Subject", choices=config.subjects),
            ui.input_select("class_level", "Class", choices=config.class_levels),
            ui.input_date("assigned_date", "Assigned", value=today),
            ui.input_date("due_date", "Due", value=today),
            ui.input_text_area("description", "Description", rows=3),
            ui.input_text("link", "Link", placeholder="https://..."),
            ui.input_action_button("add_btn", "Assign", class_="btn-primary w-100 mt-2"),
            width=300,
        ),
        ui.div(
            ui.input_select("filter_subject", "Subject", choices=_with_all(config.subjects), width="180px"),
            ui.input_select("filter_class", "Class", choices=_with_all(config.class_levels), width="140px"),
            ui.input_text("query", "Search", placeholder="Title, description, ...", width="240px"),
            class_="d-flex align-items-end gap-3 flex-wrap",
        ),
        ui.output_text("list_info"),
        ui.output_data_frame("homework_table"),
        ui.div(
            ui.output_ui("delete_picker"),
            ui.input_action_button("delete_btn", "Delete", class_="btn-outline-danger btn-sm"),
            class_="d-flex align-items-end gap-2 mt-3",
        ),
    )


@module.server
def teacher_server(input, output, session, board: BoardState, config: BoardConfig, changed):

    @reactive.calc
    def filtered():
        changed()
        return teacher_view(
            board.homeworks,
            subject=input.filter_subject(),
            class_level=input.filter_class(),
            query=input.query(),
        )

    @reactive.effect
    @reactive.event(input.add_btn)
    def _add():
        title = input.title().strip()
        if not title:
            ui.notification_show("Enter a title first.", type="warning")
            return
        added = board.add_homework(
            title=title,
            subject=input.subject(),
            class_level=input.class_level(),
            assigned_date=input.assigned_date().isoformat() if input.assigned_date() else None,
            due_date=input.due_date().isoformat() if input.due_date() else None,
            description=input.description(),
            link=input.link(),
        )
        if added is None:
            ui.notification_show("Pick a subject, a class and valid dates.", type="warning")
            return
        ui.update_text("title", value="")
        ui.update_text_area("description", value="")
        ui.update_text("link", value="")
        ui.notification_show(f"Assigned '{title}'.", type="message")

    @render.text
    def list_info():
        items = filtered()
        return f"{len(items)} of {len(board)} homework shown"

    @render.data_frame
    def homework_table():
        rows = [
            {
                "Due": hw.due_date,
                "Status": status.description,
                "Subject": hw.subject,
                "Class": hw.class_level,
                "Title": hw.title,
                "Link": hw.link,
            }
            for hw, status in annotate(filtered())
        ]
        return render.DataGrid(
            pd.DataFrame(rows, columns=["Due", "Status", "Subject", "Class", "Title", "Link"]),
            height="400px",
        )

    @render.ui
    def delete_picker():
        choices = {hw.id: f"{hw.due_date} {hw.class_level} {hw.title}" for hw in filtered()}
        return ui.input_select("delete_id", "Homework", choices=choices, width="320px")

    @reactive.effect
    @reactive.event(input.delete_btn)
    def _delete():
        homework_id = input.delete_id()
        req(homework_id)
        board.remove_homework(homework_id)
        ui.notification_show("Homework deleted.", type="message")
