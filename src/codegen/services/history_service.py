"""
Generation History Service
==========================

Append-only, most-recent-first store of past generations, capped at a fixed
number of entries (50 by default). Inserting past the cap evicts the oldest
rows. Entries can be removed one at a time or cleared in bulk.

Requires an active Flask application context (Flask-SQLAlchemy session).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from codegen.constants import DEFAULT_HISTORY_LIMIT
from codegen.extensions import db
from codegen.models import GenerationHistoryEntry
from codegen.services.generation import GenerationResult
from codegen.services.service_base import NotFoundError, OperationError, ValidationError

logger = logging.getLogger(__name__)


class HistoryService:
    """Database-backed generation history."""

    def __init__(self, limit: Optional[int] = None):
        self._limit = limit

    @property
    def limit(self) -> int:
        if self._limit is not None:
            return self._limit
        try:
            return int(current_app.config.get('HISTORY_LIMIT', DEFAULT_HISTORY_LIMIT))
        except RuntimeError:
            return DEFAULT_HISTORY_LIMIT

    def add(self, result: GenerationResult, analysis: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Insert a result at the head of the history and evict overflow."""
        entry = GenerationHistoryEntry(
            entry_id=result.id,
            prompt=result.prompt,
            language=result.language,
            code=result.code,
            timestamp=result.timestamp,
            source=str(result.source),
        )
        entry.set_analysis(analysis)
        try:
            db.session.add(entry)
            db.session.flush()
            stored = entry.to_dict()
            evicted = self._evict_overflow()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise OperationError(f"Failed to store history entry {result.id}: {e}") from e
        if evicted:
            logger.debug(f"History cap {self.limit} reached, evicted {evicted} oldest entries")
        return stored

    def _evict_overflow(self) -> int:
        limit = max(self.limit, 0)
        query = db.session.query(GenerationHistoryEntry)
        if limit == 0:
            return query.delete(synchronize_session=False)
        # seq of the oldest entry that still fits under the cap
        cutoff = (
            db.session.query(GenerationHistoryEntry.seq)
            .order_by(GenerationHistoryEntry.seq.desc())
            .offset(limit - 1)
            .limit(1)
            .scalar()
        )
        if cutoff is None:
            return 0
        return query.filter(GenerationHistoryEntry.seq < cutoff).delete(synchronize_session=False)

    def list(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Entries newest first, optionally truncated."""
        if limit is not None and limit < 0:
            raise ValidationError("limit must be non-negative")
        query = GenerationHistoryEntry.query.order_by(GenerationHistoryEntry.seq.desc())
        if limit is not None:
            query = query.limit(limit)
        return [entry.to_dict() for entry in query.all()]

    def get(self, entry_id: str) -> Dict[str, Any]:
        return self._get_entry(entry_id).to_dict()

    def delete(self, entry_id: str) -> None:
        entry = self._get_entry(entry_id)
        try:
            db.session.delete(entry)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise OperationError(f"Failed to delete history entry {entry_id}: {e}") from e
        logger.info(f"Deleted history entry {entry_id}")

    def clear(self) -> int:
        """Remove every entry; returns how many were removed."""
        try:
            removed = GenerationHistoryEntry.query.delete()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise OperationError(f"Failed to clear history: {e}") from e
        logger.info(f"Cleared generation history ({removed} entries)")
        return removed

    def count(self) -> int:
        return GenerationHistoryEntry.query.count()

    def _get_entry(self, entry_id: str) -> GenerationHistoryEntry:
        entry = GenerationHistoryEntry.query.filter_by(entry_id=entry_id).first()
        if entry is None:
            raise NotFoundError(f"History entry not found: {entry_id}")
        return entry


def get_history_service() -> HistoryService:
    """History service bound to the current app (created on first use)."""
    service = current_app.extensions.get('history_service')
    if service is None:
        service = HistoryService()
        current_app.extensions['history_service'] = service
    return service
