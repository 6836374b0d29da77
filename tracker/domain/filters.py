"""
filters.py - Query DTOs
Single responsibility: carry board form inputs into the engines.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class IssueFilter:
    labels: frozenset[str] = field(default_factory=frozenset)
    author: Optional[str] = None


@dataclass(frozen=True)
class IssueSearch:
    title: str = ""
    description: str = ""
