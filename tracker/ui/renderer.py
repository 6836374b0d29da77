"""
renderer.py - Result renderer
Single responsibility: replace the contents of the results region with issue cards or a notice.

The region is never appended to: every call builds the complete list of new
controls first and then swaps it in, so a failure while building leaves the
previous content untouched instead of half-drawn. Callers own page.update().
"""
import logging

import flet as ft

from tracker.config import (
    BORDER_RADIUS_CARD,
    COLOR_DANGER,
    COLOR_INFO_BG,
    COLOR_TEXT_MAIN,
    NOTICE_NO_RESULTS,
)
from tracker.ui.components.issue_card import IssueCard

logger = logging.getLogger(__name__)


def build_notice(message: str, error: bool = False) -> ft.Container:
    # ft.Text shows the message verbatim; no markup is interpreted
    return ft.Container(
        content=ft.Row(
            controls=[
                ft.Icon(
                    ft.Icons.ERROR_OUTLINE if error else ft.Icons.INFO_OUTLINE,
                    color=COLOR_DANGER if error else COLOR_TEXT_MAIN,
                    size=20,
                ),
                ft.Text(
                    message,
                    color=COLOR_DANGER if error else COLOR_TEXT_MAIN,
                    size=14,
                ),
            ],
            spacing=8,
        ),
        bgcolor=None if error else COLOR_INFO_BG,
        border_radius=BORDER_RADIUS_CARD,
        padding=ft.Padding.symmetric(horizontal=16, vertical=12),
        data="notice",
    )


def render_notice(region: ft.Column, message: str, *, error: bool = False) -> int:
    region.controls = [build_notice(message, error=error)]
    return 1


def render_results(region: ft.Column, issues) -> int:
    """Render issues into region in order; an empty sequence shows a notice."""
    if not issues:
        logger.debug("Rendering empty result notice")
        return render_notice(region, NOTICE_NO_RESULTS)

    cards = [IssueCard(issue) for issue in issues]
    region.controls = cards
    logger.debug("Rendered %d issue cards", len(cards))
    return len(cards)
