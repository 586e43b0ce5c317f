"""Overview module -- counts per subject, completion per class, export/import."""

from __future__ import annotations

import pandas as pd
from shiny import module, reactive, render, req, ui

from homeboard.core.config import BoardConfig
from homeboard.core.state import BoardState
from homeboard.homework.stats import overview_frame, subject_counts
from homeboard.homework.transfer import InvalidImportError, export_bytes, export_filename


@module.ui
def overview_ui():
    return ui.layout_sidebar(
        ui.sidebar(
            ui.h5("Backup"),
            ui.download_button("download_export", "Export JSON", class_="btn-primary w-100"),
            ui.tags.hr(),
            ui.input_file("import_file", "Import JSON", accept=[".json"]),
            ui.p("Importing replaces the current homework and progress.", class_="text-muted small"),
            width=280,
        ),
        ui.output_text("summary"),
        ui.layout_columns(
            ui.card(ui.card_header("Homework per Subject"), ui.output_data_frame("subject_table")),
            ui.card(ui.card_header("Completion per Class"), ui.output_data_frame("class_table")),
        ),
    )


@module.server
def overview_server(input, output, session, board: BoardState, config: BoardConfig, changed):

    @render.text
    def summary():
        changed()
        return f"{len(board)} homework, {len(board.student_names())} students tracking progress"

    @render.data_frame
    def subject_table():
        changed()
        counts = subject_counts(board.homeworks)
        return render.DataGrid(pd.DataFrame(counts, columns=["Subject", "Homework"]))

    @render.data_frame
    def class_table():
        changed()
        return render.DataGrid(overview_frame(board.homeworks, board.progress))

    @render.download(filename=lambda: export_filename())
    def download_export():
        yield export_bytes(board.export_snapshot())

    @reactive.effect
    @reactive.event(input.import_file)
    def _import():
        file_info = input.import_file()
        req(file_info)
        with open(file_info[0]["datapath"], "rb") as fh:
            content = fh.read()
        try:
            board.import_json(content)
        except InvalidImportError as e:
            ui.notification_show(f"Import failed: {e}", type="error")
            return
        ui.notification_show(f"Imported {len(board)} homework.", type="message")
