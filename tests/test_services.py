import json

import pytest

from tracker.core.filter_engine import filter_issues
from tracker.core.loader import load_collection
from tracker.database.repositories.labels import normalize_labels
from tracker.services import issue_service, project_service


def test_create_and_get_project(db_path):
    pid = project_service.create_project("  Tracker ", "  desc ", "alice")
    project = project_service.get_project(pid)
    assert project.name == "Tracker"
    assert project.description == "desc"
    assert project.author == "alice"
    assert project.created_at


def test_project_name_required(db_path):
    with pytest.raises(ValueError):
        project_service.create_project("   ")


def test_get_missing_project(db_path):
    assert project_service.get_project(999) is None


def test_list_projects_newest_first(db_path):
    first = project_service.create_project("one")
    second = project_service.create_project("two")
    assert [p.id for p in project_service.list_projects()] == [second, first]


def test_create_issue_with_labels(db_path):
    pid = project_service.create_project("p")
    iid = issue_service.create_issue(pid, " Crash ", "App dies", "alice", [" bug", "ui", "bug", ""])
    issues = issue_service.list_issues(pid)
    assert [i.id for i in issues] == [iid]
    assert issues[0].title == "Crash"
    assert issues[0].labels == ["bug", "ui"]


def test_single_string_label(db_path):
    pid = project_service.create_project("p")
    issue_service.create_issue(pid, "t", "d", "a", "bug")
    assert issue_service.list_issues(pid)[0].labels == ["bug"]


def test_issue_title_required(db_path):
    pid = project_service.create_project("p")
    with pytest.raises(ValueError):
        issue_service.create_issue(pid, "  ", "d", "a")


def test_issue_requires_existing_project(db_path):
    with pytest.raises(ValueError):
        issue_service.create_issue(42, "t", "d", "a")


def test_project_labels_unique_in_first_use_order(db_path):
    pid = project_service.create_project("p")
    issue_service.create_issue(pid, "one", "", "a", ["ui", "bug"])
    issue_service.create_issue(pid, "two", "", "b", ["docs", "bug"])
    other = project_service.create_project("other")
    issue_service.create_issue(other, "three", "", "c", ["perf"])
    assert project_service.project_labels(pid) == ["ui", "bug", "docs"]
    assert project_service.project_labels(other) == ["perf"]


def test_project_authors_unique(db_path):
    pid = project_service.create_project("p")
    issue_service.create_issue(pid, "one", "", "bob", [])
    issue_service.create_issue(pid, "two", "", "alice", [])
    issue_service.create_issue(pid, "three", "", "bob", [])
    assert project_service.project_authors(pid) == ["bob", "alice"]


def test_issues_payload_round_trips_through_loader(db_path):
    pid = project_service.create_project("p")
    issue_service.create_issue(pid, "Crash on save", "App dies", "alice", ["bug"])
    issue_service.create_issue(pid, "Typo", "minor", "bob", ["docs"])

    payload = project_service.issues_payload(pid)
    records = json.loads(payload)
    assert [r["title"] for r in records] == ["Crash on save", "Typo"]
    assert set(records[0]) == {"id", "title", "description", "author", "labels"}

    loaded = load_collection(payload)
    assert loaded.ok
    assert [i["title"] for i in filter_issues(loaded.issues, {"bug"}, "bob")] == [
        "Crash on save",
        "Typo",
    ]


def test_empty_project_payload(db_path):
    pid = project_service.create_project("p")
    assert project_service.issues_payload(pid) == "[]"


def test_normalize_labels():
    assert normalize_labels([" a", "b", "a", " "]) == ["a", "b"]
    assert normalize_labels(None) == []
    assert normalize_labels("x") == ["x"]
