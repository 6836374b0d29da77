"""
records.py - Defensive access to issue-like records
Single responsibility: read fields from snapshot records that may be malformed.
"""
from collections.abc import Mapping


def issue_field(issue, name: str, default=None):
    """Return issue[name], or default when the record is not a mapping or lacks it."""
    if isinstance(issue, Mapping):
        value = issue.get(name)
        return default if value is None else value
    return default


def issue_text(issue, name: str) -> str:
    value = issue_field(issue, name, "")
    return value if isinstance(value, str) else str(value)


def issue_labels(issue) -> list[str]:
    """Labels as a list; anything that is not a list/tuple counts as no labels."""
    labels = issue_field(issue, "labels")
    if isinstance(labels, (list, tuple)):
        return list(labels)
    return []


def unique_in_order(issues) -> list:
    """Drop repeated references, keeping first occurrence order."""
    seen: set[int] = set()
    result = []
    for issue in issues:
        if id(issue) in seen:
            continue
        seen.add(id(issue))
        result.append(issue)
    return result
