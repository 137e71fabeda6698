"""
Confirmation (operator-approved drafts -> stored schedules).

The operator may edit drafts before confirming, so plain dicts in the draft
record shape are accepted next to ScheduleDraft objects. The batch is handed
to the store in one call: it is stored completely or not at all.
"""

from __future__ import annotations

from typing import Any, Iterable

from teachload.errors import PersistenceError
from teachload.logging import get_logger
from teachload.model import ScheduleDraft

logger = get_logger(__name__)


def confirm(drafts: Iterable[Any], store) -> list[dict[str, Any]]:
    """
    Persist a batch of drafts and return the stored records (with ids).

    ``store`` needs ``insert_many(records)``, e.g. teachload.storage.ScheduleStore.
    Raises PersistenceError if the batch could not be stored.
    """
    records = [d.to_record() if isinstance(d, ScheduleDraft) else d for d in drafts]
    if not records:
        return []

    try:
        saved = store.insert_many(records)
    except PersistenceError:
        logger.error("schedules_not_saved", count=len(records))
        raise
    except Exception as exc:
        logger.error("schedules_not_saved", count=len(records), error=str(exc))
        raise PersistenceError(f"Failed to save schedules: {exc}") from exc

    logger.info("schedules_saved", count=len(saved))
    return list(saved)
