"""
projects.py - Project repository
Single responsibility: persistence for projects.
"""

from tracker.database.connection import get_connection
from tracker.database.repositories import labels as label_repo
from tracker.domain.models import Project
from tracker.utils.time import now_iso


def _row_to_project(row) -> Project:
    return Project(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        author=row["author"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def create_project(project: Project) -> int:
    with get_connection() as conn:
        cur = conn.execute(
            "INSERT INTO projects (name, description, author, created_at, updated_at)"
            " VALUES (?, ?, ?, ?, ?)",
            (
                project.name,
                project.description,
                project.author,
                project.created_at or now_iso(),
                project.updated_at or now_iso(),
            ),
        )
        pid = cur.lastrowid
        if pid is None:
            raise RuntimeError("Failed to insert project")
        return pid


def get_project(project_id: int) -> Project | None:
    with get_connection() as conn:
        row = conn.execute(
            "SELECT * FROM projects WHERE id = ?", (project_id,)
        ).fetchone()
        if not row:
            return None
        return _row_to_project(row)


def list_all() -> list[Project]:
    with get_connection() as conn:
        rows = conn.execute(
            "SELECT * FROM projects ORDER BY created_at DESC, id DESC"
        ).fetchall()
        return [_row_to_project(r) for r in rows]


def list_labels(project_id: int) -> list[str]:
    with get_connection() as conn:
        return label_repo.list_for_project(conn, project_id)
