"""
models.py - Domain models
Single responsibility: typed containers for projects and issues.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Project:
    name: str
    description: str
    author: str
    created_at: str | None = None
    updated_at: str | None = None
    id: Optional[int] = None

    def __getitem__(self, key):
        return getattr(self, key)


@dataclass
class Issue:
    project_id: int
    title: str
    description: str
    author: str
    labels: list[str] = field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None
    id: Optional[int] = None

    def __getitem__(self, key):
        return getattr(self, key)

    def to_record(self) -> dict:
        """Plain mapping as embedded in the board snapshot."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "labels": list(self.labels),
        }
