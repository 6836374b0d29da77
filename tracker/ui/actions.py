"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal flows that create projects and issues.
"""

import flet as ft

from tracker.config import (
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_DANGER,
    COLOR_PRIMARY,
)
from tracker.services import issue_service, project_service
from tracker.ui.helpers import parse_labels


def _text_field(label: str, **kwargs) -> ft.TextField:
    return ft.TextField(
        label=label,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        **kwargs,
    )


def _show_form_dialog(page: ft.Page, title: str, fields: list, submit_text: str, on_submit):
    """Modal dialog with an inline error line; on_submit raises ValueError to keep it open."""
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    def on_save(_e=None):
        try:
            on_submit()
        except ValueError as e:
            error_text.value = f"⚠  {e}"
            page.update()
            return
        dialog.open = False
        page.update()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(controls=[*fields, error_text], spacing=16, tight=True),
            width=560,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                submit_text,
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_new_project_dialog(page: ft.Page, user: str, on_created):
    """Open a dialog to create a project and refresh the home view on success."""
    name_field = _text_field("Name *")
    description_field = _text_field("Description", multiline=True, min_lines=3, max_lines=8)
    author_field = _text_field("Author", value=user)

    def submit():
        pid = project_service.create_project(
            name=name_field.value,
            description=description_field.value,
            author=author_field.value,
        )
        on_created(pid)

    _show_form_dialog(
        page,
        "New project",
        [name_field, description_field, author_field],
        "Create",
        submit,
    )


def show_new_issue_dialog(page: ft.Page, project_id: int, user: str, on_created):
    """Open a dialog to create an issue in project_id and reload the board on success."""
    title_field = _text_field("Title *")
    description_field = _text_field("Description", multiline=True, min_lines=4, max_lines=12)
    author_field = _text_field("Author", value=user)
    labels_field = _text_field("Labels (comma separated)")

    def submit():
        iid = issue_service.create_issue(
            project_id=project_id,
            title=title_field.value,
            description=description_field.value,
            author=author_field.value,
            labels=parse_labels(labels_field.value),
        )
        on_created(iid)

    _show_form_dialog(
        page,
        "New issue",
        [title_field, description_field, author_field, labels_field],
        "Create",
        submit,
    )
