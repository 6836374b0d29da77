"""
board_service.py - Filter/search submissions for the project board
Single responsibility: run one evaluation per form submission and turn any
fault into a notice in the results region.
"""
import logging

from tracker.config import NOTICE_FILTER_ERROR, NOTICE_SEARCH_ERROR
from tracker.core.errors import EvaluationFailure
from tracker.core.filter_engine import filter_issues
from tracker.core.loader import LoadResult
from tracker.core.search_engine import search_issues
from tracker.domain.filters import IssueFilter, IssueSearch
from tracker.ui.renderer import render_notice, render_results

logger = logging.getLogger(__name__)


def show_snapshot(region, loaded: LoadResult) -> list:
    """Initial board render: every issue, or the load notice."""
    if not loaded.ok:
        unavailable = loaded.unavailable
        render_notice(region, unavailable.message, error=unavailable.reason != "missing")
        return []
    return submit_filter(region, loaded.issues, IssueFilter())


def submit_filter(region, collection, query: IssueFilter) -> list:
    try:
        results = filter_issues(collection, query.labels, query.author)
        render_results(region, results)
        return results
    except Exception as e:
        _report(region, EvaluationFailure("filter", NOTICE_FILTER_ERROR, e))
        return []


def submit_search(region, collection, query: IssueSearch) -> list:
    try:
        results = search_issues(collection, query.title, query.description)
        render_results(region, results)
        return results
    except Exception as e:
        _report(region, EvaluationFailure("search", NOTICE_SEARCH_ERROR, e))
        return []


def _report(region, failure: EvaluationFailure) -> None:
    logger.error(
        "Error during %s: %s", failure.operation, failure.cause, exc_info=failure.cause
    )
    render_notice(region, failure.message, error=True)
