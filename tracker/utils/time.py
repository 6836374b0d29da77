"""
time.py - Timestamp helper
Single responsibility: ISO timestamps stored in created_at / updated_at columns.
"""
from datetime import datetime


def now_iso() -> str:
    """Local time, second precision (e.g. 2024-05-01T09:30:00)."""
    return datetime.now().isoformat(timespec="seconds")
