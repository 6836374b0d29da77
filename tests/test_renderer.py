import flet as ft

from tracker.config import (
    FALLBACK_AUTHOR,
    FALLBACK_DESCRIPTION,
    FALLBACK_TITLE,
    NOTICE_NO_RESULTS,
)
from tracker.ui.components.issue_card import IssueCard, card_markdown
from tracker.ui.renderer import render_notice, render_results


def _notice_text(region: ft.Column) -> str:
    return region.controls[0].content.controls[1].value


def test_empty_results_render_notice():
    region = ft.Column()
    render_results(region, [])
    assert len(region.controls) == 1
    assert region.controls[0].data == "notice"
    assert _notice_text(region) == NOTICE_NO_RESULTS


def test_empty_render_is_idempotent():
    region = ft.Column()
    render_results(region, [])
    render_results(region, [])
    assert len(region.controls) == 1
    assert _notice_text(region) == NOTICE_NO_RESULTS


def test_render_replaces_previous_content(sample_issues):
    region = ft.Column(controls=[ft.Text("stale")])
    count = render_results(region, list(sample_issues))
    assert count == 2
    assert all(isinstance(c, IssueCard) for c in region.controls)
    assert [c.issue for c in region.controls] == list(sample_issues)

    render_results(region, [sample_issues[1]])
    assert len(region.controls) == 1
    assert region.controls[0].issue is sample_issues[1]


def test_render_notice_replaces_cards(sample_issues):
    region = ft.Column()
    render_results(region, list(sample_issues))
    render_notice(region, "Error loading issue data.", error=True)
    assert len(region.controls) == 1
    assert _notice_text(region) == "Error loading issue data."


def test_card_contains_fields(sample_issues):
    md = card_markdown(sample_issues[0])
    assert "Crash on save" in md
    assert "Author: alice" in md
    assert "App dies" in md
    assert "**Labels:** bug" in md


def test_card_joins_labels():
    md = card_markdown({"title": "t", "description": "d", "author": "a", "labels": ["bug", "ui"]})
    assert "**Labels:** bug, ui" in md


def test_card_omits_empty_labels():
    for labels in ([], None, "bug"):
        md = card_markdown({"title": "t", "description": "d", "author": "a", "labels": labels})
        assert "Labels" not in md


def test_card_fallbacks_for_missing_fields():
    md = card_markdown({})
    assert FALLBACK_TITLE in md
    assert FALLBACK_AUTHOR in md
    assert FALLBACK_DESCRIPTION in md


def test_card_escapes_markup_in_every_field():
    issue = {
        "title": "<img src=x onerror=alert(1)>",
        "author": "[me](http://evil)",
        "description": "**loud** <b>bold</b>",
        "labels": ["<i>x</i>"],
    }
    md = card_markdown(issue)
    assert "<img" not in md
    assert "<b>" not in md
    assert "<i>" not in md
    assert "](" not in md
    assert "**loud**" not in md
    assert "\\<img src\\=x onerror\\=alert\\(1\\)\\>" in md


def test_issue_card_wraps_markdown(sample_issues):
    card = IssueCard(sample_issues[0])
    assert isinstance(card.content, ft.Markdown)
    assert card.content.value == card_markdown(sample_issues[0])


def test_card_description_with_trailing_newline_has_no_stray_backslash():
    md = card_markdown({"title": "t", "description": "done\n", "author": "a", "labels": ["x"]})
    assert "done\n\n**Labels:** x" in md
    assert "done\\" not in md
