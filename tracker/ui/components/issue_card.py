import flet as ft

from tracker.config import (
    BORDER_RADIUS_CARD,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    FALLBACK_AUTHOR,
    FALLBACK_DESCRIPTION,
    FALLBACK_TITLE,
)
from tracker.core.records import issue_labels, issue_text
from tracker.ui.helpers import escape_markdown


def card_markdown(issue) -> str:
    """Markdown body of one issue card; every stored field is escaped."""
    title = issue_text(issue, "title") or FALLBACK_TITLE
    author = issue_text(issue, "author") or FALLBACK_AUTHOR
    description = issue_text(issue, "description") or FALLBACK_DESCRIPTION
    labels = issue_labels(issue)

    parts = [
        f"#### {escape_markdown(title)}",
        f"*Author: {escape_markdown(author)}*",
        escape_markdown(description),
    ]
    if labels:
        joined = ", ".join(escape_markdown(lbl) for lbl in labels)
        parts.append(f"**Labels:** {joined}")
    return "\n\n".join(parts)


class IssueCard(ft.Container):
    def __init__(self, issue):
        super().__init__()
        self.issue = issue

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.Border.all(1, "transparent")
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK_12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.Margin.only(bottom=12)

        self.content = ft.Markdown(
            value=card_markdown(issue),
            selectable=True,
            extension_set=ft.MarkdownExtensionSet.COMMON_MARK,
            md_style_sheet=ft.MarkdownStyleSheet(
                h4_text_style=ft.TextStyle(
                    size=16, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN
                ),
                em_text_style=ft.TextStyle(size=12, color=COLOR_TEXT_MUTED),
                strong_text_style=ft.TextStyle(
                    size=12, weight=ft.FontWeight.W_500, color=COLOR_PRIMARY
                ),
            ),
        )
