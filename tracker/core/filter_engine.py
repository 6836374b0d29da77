"""
filter_engine.py - Label / author filtering over an issue collection
Single responsibility: evaluate facet predicates and combine them.

Active facets are combined with OR: with both a label set and an author
selected, an issue appears when it matches either one.
"""
import logging
from collections.abc import Iterable

from tracker.core.records import issue_field, issue_labels, unique_in_order

logger = logging.getLogger(__name__)


def matches_author(issue, author: str | None) -> bool:
    return bool(author) and issue_field(issue, "author") == author


def matches_label(issue, labels: frozenset[str]) -> bool:
    if not labels:
        return False
    issue_label_list = issue_labels(issue)
    return any(label in issue_label_list for label in labels)


def filter_issues(collection, labels: Iterable[str] | None = None, author: str | None = None) -> list:
    """Return the issues matching the active facets, in collection order.

    No active facet returns the whole collection.
    """
    selected = frozenset(labels or ())
    author = author or None

    if not selected and author is None:
        logger.debug("No filters applied, returning all %d issues", len(collection))
        return list(collection)

    matched = []
    for issue in collection:
        if author is not None and selected:
            include = matches_author(issue, author) or matches_label(issue, selected)
        elif author is not None:
            include = matches_author(issue, author)
        else:
            include = matches_label(issue, selected)
        if include:
            matched.append(issue)

    result = unique_in_order(matched)
    logger.debug(
        "Filter labels=%s author=%s matched %d of %d issues",
        set(selected),
        author,
        len(result),
        len(collection),
    )
    return result
