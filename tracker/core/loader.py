"""
loader.py - Issue collection loader
Single responsibility: turn the serialized issue snapshot into an immutable collection.
"""

import json
import logging
from dataclasses import dataclass

from tracker.config import NOTICE_LOAD_ERROR, NOTICE_NO_DATA
from tracker.core.errors import DataUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    issues: tuple = ()
    unavailable: DataUnavailable | None = None

    @property
    def ok(self) -> bool:
        return self.unavailable is None


def load_collection(payload: str | bytes | None) -> LoadResult:
    """Parse a JSON array of issue records.

    Never raises: a missing, empty, malformed or non-array payload yields an
    empty collection and a DataUnavailable describing what went wrong.
    Individual records are not validated here; readers access fields
    defensively.
    """
    if payload is None or not payload.strip():
        logger.warning("Issue snapshot is empty or missing")
        return LoadResult(unavailable=DataUnavailable(NOTICE_NO_DATA, reason="missing"))

    try:
        data = json.loads(payload)
    except (ValueError, TypeError, RecursionError) as e:
        logger.error("Failed to parse issue snapshot: %s", e)
        return LoadResult(unavailable=DataUnavailable(NOTICE_LOAD_ERROR, reason="malformed"))

    if not isinstance(data, list):
        logger.error("Issue snapshot is not an array: %s", type(data).__name__)
        return LoadResult(unavailable=DataUnavailable(NOTICE_LOAD_ERROR, reason="not-array"))

    logger.info("Loaded %d issues from snapshot", len(data))
    return LoadResult(issues=tuple(data))
