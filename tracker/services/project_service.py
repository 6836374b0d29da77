"""
project_service.py - Project service layer
Single responsibility: orchestrate project operations and build the board snapshot.
"""
import json
import logging

from tracker.database.repositories import issues as issue_repo
from tracker.database.repositories import projects as project_repo
from tracker.domain.models import Project
from tracker.utils.time import now_iso

logger = logging.getLogger(__name__)


def create_project(name: str, description: str = "", author: str = "") -> int:
    name = (name or "").strip()
    if not name:
        raise ValueError("Project name is required")
    project = Project(
        name=name,
        description=(description or "").strip(),
        author=(author or "").strip(),
        created_at=now_iso(),
        updated_at=now_iso(),
    )
    pid = project_repo.create_project(project)
    logger.info("Created project %s (%s)", pid, name)
    return pid


def list_projects() -> list[Project]:
    return project_repo.list_all()


def get_project(project_id: int) -> Project | None:
    return project_repo.get_project(project_id)


def project_labels(project_id: int) -> list[str]:
    return project_repo.list_labels(project_id)


def project_authors(project_id: int) -> list[str]:
    return issue_repo.list_authors(project_id)


def issues_payload(project_id: int) -> str:
    """Serialize the project's issues as the JSON array the board loads."""
    records = [issue.to_record() for issue in issue_repo.list_by_project(project_id)]
    return json.dumps(records, ensure_ascii=False)
