"""
views.py - UI view builders (home/board)
Single responsibility: build flet Views using provided callbacks/state.
"""

import logging

import flet as ft

from tracker.config import (
    APP_TITLE,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_SUCCESS,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    SHADOW_ELEVATION,
)
from tracker.core.loader import load_collection
from tracker.domain.models import Project
from tracker.services import board_service, filter_service, project_service
from tracker.ui.helpers import format_datetime

logger = logging.getLogger(__name__)


def build_appbar(user: str, title: str = APP_TITLE, on_back=None) -> ft.AppBar:
    return ft.AppBar(
        leading=(
            ft.IconButton(
                icon=ft.Icons.ARROW_BACK,
                icon_color=COLOR_APPBAR_FG,
                on_click=lambda _e: on_back(),
            )
            if on_back
            else None
        ),
        title=ft.Text(
            title,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK_12,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(
                    f"🟢  {user}", color=COLOR_SUCCESS, size=14, weight=ft.FontWeight.W_500
                ),
                padding=ft.Padding.only(right=24),
                alignment=ft.Alignment.CENTER_LEFT,
            ),
        ],
    )


def _panel(content, **kwargs) -> ft.Container:
    return ft.Container(
        content=content,
        padding=ft.Padding.all(16),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        border=ft.Border.all(1, COLOR_BORDER),
        shadow=ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK_12,
            offset=ft.Offset(0, 1),
        ),
        **kwargs,
    )


def build_home_view(user: str, on_new_project, on_select_project) -> ft.View:
    projects = project_service.list_projects()

    def build_project_card(project: Project) -> ft.Container:
        def on_tap(_e, pid=project.id):
            on_select_project(pid)

        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text(
                        project.name,
                        weight=ft.FontWeight.BOLD,
                        size=16,
                        color=COLOR_TEXT_MAIN,
                        max_lines=1,
                        overflow=ft.TextOverflow.ELLIPSIS,
                    ),
                    ft.Text(
                        f"{project.author or '-'} ・ {format_datetime(project.created_at)}",
                        size=12,
                        color=COLOR_TEXT_MUTED,
                    ),
                    ft.Text(
                        project.description,
                        size=13,
                        color=COLOR_TEXT_MAIN,
                        max_lines=2,
                        overflow=ft.TextOverflow.ELLIPSIS,
                    ),
                ],
                spacing=4,
            ),
            padding=ft.Padding.all(16),
            bgcolor=COLOR_CARD,
            border_radius=BORDER_RADIUS_CARD,
            shadow=ft.BoxShadow(
                blur_radius=2,
                color=ft.Colors.BLACK_12,
                offset=ft.Offset(0, 1),
            ),
            on_click=on_tap,
            ink=True,
            margin=ft.Margin.only(bottom=12),
        )

    if projects:
        list_controls = [build_project_card(p) for p in projects]
    else:
        list_controls = [
            ft.Container(
                content=ft.Column(
                    [
                        ft.Icon(ft.Icons.INBOX, size=64, color="#d0d7de"),
                        ft.Text("No projects yet", color=COLOR_TEXT_MUTED, size=16),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                ),
                alignment=ft.Alignment.CENTER,
                padding=60,
                expand=True,
            )
        ]

    actions_row = ft.Row(
        controls=[
            ft.FilledButton(
                "New project",
                icon=ft.Icons.ADD,
                style=ft.ButtonStyle(
                    bgcolor=COLOR_SUCCESS,
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
                on_click=lambda _e: on_new_project(),
            ),
        ],
        alignment=ft.MainAxisAlignment.END,
    )

    return ft.View(
        route="/",
        appbar=build_appbar(user),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        controls=[
            actions_row,
            ft.Container(height=16),
            ft.Column(controls=list_controls, scroll=ft.ScrollMode.AUTO, expand=True, spacing=0),
        ],
    )


def build_board_view(
    page: ft.Page,
    user: str,
    project: Project,
    on_back,
    on_new_issue,
) -> ft.View:
    """Project board: filter form, search form and the results region.

    The issue snapshot is loaded once here and handed to each submission;
    the forms never re-read the database.
    """
    loaded = load_collection(project_service.issues_payload(project.id))
    label_names = project_service.project_labels(project.id)
    authors = project_service.project_authors(project.id)

    results = ft.Column(scroll=ft.ScrollMode.AUTO, expand=True, spacing=0)
    board_service.show_snapshot(results, loaded)

    label_boxes = [ft.Checkbox(label=name, value=False, data=name) for name in label_names]
    author_group = ft.RadioGroup(
        content=ft.Column(
            controls=[ft.Radio(value=a, label=a) for a in authors],
            spacing=0,
        ),
    )
    title_field = ft.TextField(
        label="Title",
        prefix_icon=ft.Icons.SEARCH,
        border_radius=BORDER_RADIUS_BTN,
        text_size=14,
    )
    description_field = ft.TextField(
        label="Description",
        prefix_icon=ft.Icons.SEARCH,
        border_radius=BORDER_RADIUS_BTN,
        text_size=14,
    )

    def on_filter(_e=None):
        query = filter_service.build_filter(
            labels=[cb.data for cb in label_boxes if cb.value],
            author=author_group.value,
        )
        logger.info("Filter submitted: labels=%s author=%s", sorted(query.labels), query.author)
        board_service.submit_filter(results, loaded.issues, query)
        page.update()

    def on_clear_filter(_e=None):
        for cb in label_boxes:
            cb.value = False
        author_group.value = None
        on_filter()

    def on_search(_e=None):
        query = filter_service.build_search(title_field.value, description_field.value)
        logger.info("Search submitted: title=%r description=%r", query.title, query.description)
        board_service.submit_search(results, loaded.issues, query)
        page.update()

    title_field.on_submit = on_search
    description_field.on_submit = on_search

    filter_form = _panel(
        ft.Column(
            controls=[
                ft.Text("Filter", weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                ft.Text("Labels", size=12, color=COLOR_TEXT_MUTED),
                *(label_boxes or [ft.Text("No labels yet", size=12, color=COLOR_TEXT_MUTED)]),
                ft.Text("Author", size=12, color=COLOR_TEXT_MUTED),
                author_group if authors else ft.Text("No authors yet", size=12, color=COLOR_TEXT_MUTED),
                ft.Row(
                    controls=[
                        ft.FilledButton(
                            "Filter",
                            icon=ft.Icons.FILTER_LIST,
                            style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                            on_click=on_filter,
                            disabled=not loaded.ok,
                        ),
                        ft.TextButton(
                            "Clear",
                            icon=ft.Icons.CLEAR,
                            on_click=on_clear_filter,
                            disabled=not loaded.ok,
                        ),
                    ],
                    spacing=8,
                ),
            ],
            spacing=6,
            scroll=ft.ScrollMode.AUTO,
        ),
    )

    search_form = _panel(
        ft.Column(
            controls=[
                ft.Text("Search", weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                title_field,
                description_field,
                ft.FilledButton(
                    "Search",
                    icon=ft.Icons.SEARCH,
                    style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                    on_click=on_search,
                    disabled=not loaded.ok,
                ),
            ],
            spacing=10,
        ),
    )

    header = ft.Row(
        controls=[
            ft.Column(
                controls=[
                    ft.Text(project.name, size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                    ft.Text(
                        f"{project.author or '-'} ・ {project.description}",
                        size=13,
                        color=COLOR_TEXT_MUTED,
                    ),
                ],
                spacing=2,
                expand=True,
            ),
            ft.FilledButton(
                "New issue",
                icon=ft.Icons.ADD,
                style=ft.ButtonStyle(
                    bgcolor=COLOR_SUCCESS,
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
                on_click=lambda _e: on_new_issue(),
            ),
        ],
        vertical_alignment=ft.CrossAxisAlignment.START,
    )

    body = ft.ResponsiveRow(
        controls=[
            ft.Column(
                controls=[filter_form, search_form],
                spacing=12,
                col={"xs": 12, "md": 4, "lg": 3},
            ),
            ft.Container(content=results, col={"xs": 12, "md": 8, "lg": 9}),
        ],
        spacing=16,
        run_spacing=16,
        vertical_alignment=ft.CrossAxisAlignment.START,
        expand=True,
    )

    return ft.View(
        route=f"/project/{project.id}",
        appbar=build_appbar(user, title=project.name, on_back=on_back),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        controls=[header, ft.Container(height=16), body],
    )
