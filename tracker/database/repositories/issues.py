"""
issues.py - Issue repository
Single responsibility: persistence for issues and label relations.
"""

from tracker.database.connection import get_connection
from tracker.database.repositories.labels import ensure_labels, normalize_labels
from tracker.domain.models import Issue
from tracker.utils.time import now_iso


def _set_issue_labels(conn, issue_id: int, labels: list[str]) -> None:
    conn.execute("DELETE FROM issue_labels WHERE issue_id = ?", (issue_id,))
    if not labels:
        return
    ids = ensure_labels(conn, labels)
    for position, lid in enumerate(ids):
        conn.execute(
            "INSERT OR IGNORE INTO issue_labels (issue_id, label_id, position) VALUES (?, ?, ?)",
            (issue_id, lid, position),
        )


def _row_to_issue(row, labels: list[str]) -> Issue:
    return Issue(
        id=row["id"],
        project_id=row["project_id"],
        title=row["title"],
        description=row["description"],
        author=row["author"],
        labels=labels,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def create_issue(issue: Issue) -> int:
    labels = normalize_labels(issue.labels)
    with get_connection() as conn:
        cur = conn.execute(
            "INSERT INTO issues (project_id, title, description, author, created_at, updated_at)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            (
                issue.project_id,
                issue.title,
                issue.description,
                issue.author,
                issue.created_at or now_iso(),
                issue.updated_at or now_iso(),
            ),
        )
        iid = cur.lastrowid
        if iid is None:
            raise RuntimeError("Failed to insert issue")
        _set_issue_labels(conn, iid, labels)
        conn.execute(
            "UPDATE projects SET updated_at = ? WHERE id = ?",
            (now_iso(), issue.project_id),
        )
        return iid


def get_labels_map(conn, issue_ids: list[int]) -> dict[int, list[str]]:
    if not issue_ids:
        return {}
    placeholders = ",".join(["?"] * len(issue_ids))
    query = f"""
        SELECT il.issue_id, l.name
        FROM issue_labels il
        JOIN labels l ON l.id = il.label_id
        WHERE il.issue_id IN ({placeholders})
        ORDER BY il.position
    """
    result: dict[int, list[str]] = {iid: [] for iid in issue_ids}
    for row in conn.execute(query, issue_ids).fetchall():
        result.setdefault(row["issue_id"], []).append(row["name"])
    return result


def list_by_project(project_id: int) -> list[Issue]:
    with get_connection() as conn:
        rows = conn.execute(
            "SELECT * FROM issues WHERE project_id = ? ORDER BY id",
            (project_id,),
        ).fetchall()
        labels_map = get_labels_map(conn, [r["id"] for r in rows])
        return [_row_to_issue(r, labels_map.get(r["id"], [])) for r in rows]


def list_authors(project_id: int) -> list[str]:
    with get_connection() as conn:
        rows = conn.execute(
            """
            SELECT author
            FROM issues
            WHERE project_id = ? AND author != ''
            GROUP BY author
            ORDER BY MIN(id)
            """,
            (project_id,),
        ).fetchall()
        return [r["author"] for r in rows]
