"""
search_engine.py - Title / description substring search
Single responsibility: case-insensitive substring matching over an issue collection.
"""
import logging

from tracker.core.records import issue_text, unique_in_order

logger = logging.getLogger(__name__)


def normalize_term(term: str | None) -> str:
    return (term or "").strip().lower()


def title_match(issue, term: str) -> bool:
    """term must already be normalized; an empty term never matches."""
    return bool(term) and term in issue_text(issue, "title").lower()


def description_match(issue, term: str) -> bool:
    return bool(term) and term in issue_text(issue, "description").lower()


def search_issues(collection, title_term: str | None = "", description_term: str | None = "") -> list:
    """Return issues whose title contains title_term or whose description
    contains description_term, in collection order.

    Both terms empty returns the whole collection.
    """
    title_value = normalize_term(title_term)
    description_value = normalize_term(description_term)

    if not title_value and not description_value:
        logger.debug("Search terms empty, returning all %d issues", len(collection))
        return list(collection)

    matched = [
        issue
        for issue in collection
        if title_match(issue, title_value) or description_match(issue, description_value)
    ]
    result = unique_in_order(matched)
    logger.debug(
        "Search title=%r description=%r matched %d of %d issues",
        title_value,
        description_value,
        len(result),
        len(collection),
    )
    return result
