"""
app_main.py - Issue Board main application
"""

import logging

import flet as ft

from tracker.config import APP_TITLE, COLOR_BG, COLOR_DANGER, COLOR_PRIMARY
from tracker.database.schema import initialize_schema
from tracker.services import project_service
from tracker.ui import actions, views
from tracker.ui.helpers import current_user

logger = logging.getLogger(__name__)


def main(page: ft.Page):
    page.title = APP_TITLE
    page.window.maximized = True
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    user = current_user()

    initialize_schema()

    def show_error(exc: Exception):
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Something went wrong", color=COLOR_DANGER),
                content=ft.Text(f"Details: {exc}"),
                open=True,
            )
        )
        page.update()

    def show_home():
        try:
            page.views.clear()
            page.views.append(
                views.build_home_view(
                    user=user,
                    on_new_project=lambda: actions.show_new_project_dialog(
                        page, user, lambda _pid: show_home()
                    ),
                    on_select_project=open_project,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error building home view")
            show_error(exc)

    def open_project(project_id: int):
        try:
            project = project_service.get_project(project_id)
            if project is None:
                logger.warning("Project %s not found", project_id)
                show_home()
                return
            board = views.build_board_view(
                page=page,
                user=user,
                project=project,
                on_back=show_home,
                on_new_issue=lambda: actions.show_new_issue_dialog(
                    page, project_id, user, lambda _iid: open_project(project_id)
                ),
            )
            # Replace a stale board (after creating an issue) instead of stacking it
            while len(page.views) > 1:
                page.views.pop()
            page.views.append(board)
            page.update()
        except Exception as exc:
            logger.exception("Error building board for project %s", project_id)
            show_error(exc)

    def view_pop(_e: ft.ViewPopEvent = None):
        show_home()

    page.on_view_pop = view_pop
    show_home()
