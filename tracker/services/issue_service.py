"""
issue_service.py - Issue service layer
Single responsibility: orchestrate issue operations and enforce policies.
"""
import logging

from tracker.database.repositories import issues as issue_repo
from tracker.database.repositories import projects as project_repo
from tracker.database.repositories.labels import normalize_labels
from tracker.domain.models import Issue
from tracker.utils.time import now_iso

logger = logging.getLogger(__name__)


def create_issue(
    project_id: int,
    title: str,
    description: str,
    author: str,
    labels: list[str] | str | None = None,
) -> int:
    title = (title or "").strip()
    if not title:
        raise ValueError("Issue title is required")
    if project_repo.get_project(project_id) is None:
        raise ValueError(f"Project {project_id} not found")
    issue = Issue(
        project_id=project_id,
        title=title,
        description=(description or "").strip(),
        author=(author or "").strip(),
        labels=normalize_labels(labels),
        created_at=now_iso(),
        updated_at=now_iso(),
    )
    iid = issue_repo.create_issue(issue)
    logger.info("Created issue %s in project %s", iid, project_id)
    return iid


def list_issues(project_id: int) -> list[Issue]:
    return issue_repo.list_by_project(project_id)
