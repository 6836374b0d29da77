import flet as ft

from tracker.config import (
    NOTICE_FILTER_ERROR,
    NOTICE_LOAD_ERROR,
    NOTICE_NO_DATA,
    NOTICE_NO_RESULTS,
    NOTICE_SEARCH_ERROR,
)
from tracker.core.loader import load_collection
from tracker.domain.filters import IssueFilter
from tracker.services import board_service, filter_service
from tracker.ui.components.issue_card import IssueCard


def _notice_text(region: ft.Column) -> str:
    return region.controls[0].content.controls[1].value


def test_show_snapshot_renders_all_issues(sample_issues):
    region = ft.Column()
    loaded = load_collection('[{"title": "a"}, {"title": "b"}]')
    results = board_service.show_snapshot(region, loaded)
    assert len(results) == 2
    assert len(region.controls) == 2


def test_show_snapshot_missing_payload():
    region = ft.Column()
    assert board_service.show_snapshot(region, load_collection(None)) == []
    assert _notice_text(region) == NOTICE_NO_DATA


def test_show_snapshot_malformed_payload():
    region = ft.Column()
    board_service.show_snapshot(region, load_collection("{oops"))
    assert _notice_text(region) == NOTICE_LOAD_ERROR


def test_concrete_filter_scenario(sample_issues):
    region = ft.Column()
    query = filter_service.build_filter(labels=["bug"], author="bob")
    results = board_service.submit_filter(region, sample_issues, query)
    assert results == list(sample_issues)
    assert [c.issue for c in region.controls] == list(sample_issues)


def test_unknown_author_renders_notice(sample_issues):
    region = ft.Column()
    query = filter_service.build_filter(labels=[], author="carol")
    assert board_service.submit_filter(region, sample_issues, query) == []
    assert _notice_text(region) == NOTICE_NO_RESULTS


def test_concrete_search_scenario(sample_issues):
    region = ft.Column()
    results = board_service.submit_search(
        region, sample_issues, filter_service.build_search("crash", "")
    )
    assert results == [sample_issues[0]]
    results = board_service.submit_search(
        region, sample_issues, filter_service.build_search("", "MINOR")
    )
    assert results == [sample_issues[1]]
    assert isinstance(region.controls[0], IssueCard)


def test_filter_failure_is_contained(sample_issues, monkeypatch, caplog):
    def boom(*_args, **_kwargs):
        raise RuntimeError("broken record")

    monkeypatch.setattr(board_service, "filter_issues", boom)
    region = ft.Column(controls=[ft.Text("previous")])
    results = board_service.submit_filter(region, sample_issues, filter_service.build_filter(["bug"]))
    assert results == []
    assert len(region.controls) == 1
    assert _notice_text(region) == NOTICE_FILTER_ERROR
    assert "broken record" in caplog.text


def test_render_failure_is_contained(sample_issues, monkeypatch):
    def boom(*_args, **_kwargs):
        raise ValueError("cannot draw")

    monkeypatch.setattr(board_service, "render_results", boom)
    region = ft.Column()
    results = board_service.submit_search(region, sample_issues, filter_service.build_search("typo"))
    assert results == []
    assert _notice_text(region) == NOTICE_SEARCH_ERROR


def test_build_filter_normalizes_inputs():
    query = filter_service.build_filter(labels=["bug", "", "bug"], author="")
    assert query.labels == frozenset({"bug"})
    assert query.author is None
    assert filter_service.build_filter() == IssueFilter()


def test_build_search_defaults():
    query = filter_service.build_search(None, None)
    assert query.title == ""
    assert query.description == ""
