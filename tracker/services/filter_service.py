"""
filter_service.py - Build query DTOs from form state
Single responsibility: normalize raw control values into IssueFilter / IssueSearch.
"""
from tracker.domain.filters import IssueFilter, IssueSearch


def build_filter(labels=None, author: str | None = None) -> IssueFilter:
    # Unchecked radio groups report None or ""; both mean no author facet
    return IssueFilter(
        labels=frozenset(lbl for lbl in (labels or []) if lbl),
        author=author or None,
    )


def build_search(title: str | None = "", description: str | None = "") -> IssueSearch:
    return IssueSearch(title=title or "", description=description or "")
