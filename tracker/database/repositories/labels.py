"""
labels.py - Label repository
Single responsibility: normalization and lookup for labels.
"""


def normalize_labels(labels: list[str] | str | None) -> list[str]:
    """Trim, drop blanks and duplicates, keep first-seen order.

    A single string counts as one label (a form posting only one value).
    """
    if not labels:
        return []
    if isinstance(labels, str):
        labels = [labels]
    seen = set()
    normalized: list[str] = []
    for raw in labels:
        name = raw.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        normalized.append(name)
    return normalized


def ensure_labels(conn, labels: list[str]) -> list[int]:
    label_ids: list[int] = []
    for name in labels:
        conn.execute("INSERT OR IGNORE INTO labels (name) VALUES (?)", (name,))
        row = conn.execute("SELECT id FROM labels WHERE name = ?", (name,)).fetchone()
        if row:
            label_ids.append(row["id"])
    return label_ids


def list_for_project(conn, project_id: int) -> list[str]:
    """Unique labels used by a project's issues, in first-use order."""
    rows = conn.execute(
        """
        SELECT l.name
        FROM issue_labels il
        JOIN labels l ON l.id = il.label_id
        JOIN issues i ON i.id = il.issue_id
        WHERE i.project_id = ?
        ORDER BY i.id, il.position
        """,
        (project_id,),
    ).fetchall()
    return normalize_labels([r["name"] for r in rows])
