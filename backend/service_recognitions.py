"""
Service / facade layer.

This module implements business rules and normalization before any store
interaction. It is free of Redis commands; it calls `RecognitionRepo` to
perform reads and writes. All write paths should go through this service
so every event is validated and bucketed the same way.

Key responsibilities:
- validate event semantics (owner id, allowed `document_type` values)
- enforce timestamp rules (timezone-awareness, UTC, whole seconds)
- compute the UTC day bucket of each event
- rebuild ordered lists of events and day aggregates from the indexes
"""

import logging
from datetime import datetime, timezone
from typing import List

import codec
from models import DayAggregate, RecognitionEvent
from repo_recognitions import INT64_MAX, INT64_MIN, RecognitionRepo

logger = logging.getLogger(__name__)


ALLOWED_DOCUMENT_TYPES = {
    "Passport",
    "IdCard",
    "DriverLicense",
    "ProofOfAddress",
}


def truncate_day(value: datetime) -> datetime:
    """Return 00:00:00 of `value`'s calendar date in UTC.

    Naive datetimes are taken to be UTC already. Applying this to its own
    result returns the same instant.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def _require_owner(owner_id: str) -> None:
    if not owner_id:
        raise ValueError("owner_id must be a non-empty string")


class RecognitionService:
    """Business rules + validation + day bucketing.

    Example usage:
        repo = RecognitionRepo()
        svc = RecognitionService(repo)
        svc.save_recognition('owner-1', event)
        days = svc.list_recognition_days('owner-1')
    """

    def __init__(self, repo: RecognitionRepo):
        self.repo = repo

    def save_recognition(self, owner_id: str, event: RecognitionEvent) -> RecognitionEvent:
        """Validate, normalize and persist one event for `owner_id`.

        Returns the event as stored (UTC, whole seconds).

        Raises:
        - `ValueError` for an empty owner, naive timestamp, unknown type or
          an amount (or day total) outside signed 64-bit range
        - `StoreUnavailable` if the store does not respond
        """

        _require_owner(owner_id)
        if event.document_type not in ALLOWED_DOCUMENT_TYPES:
            raise ValueError(f"Unsupported document type: {event.document_type}")
        if not INT64_MIN <= event.amount <= INT64_MAX:
            raise ValueError(f"Amount out of signed 64-bit range: {event.amount}")
        if event.time.tzinfo is None:
            raise ValueError("Timestamp must include timezone info (e.g., 2020-08-17T01:00:00Z)")

        # Stored with seconds resolution, so normalize before bucketing.
        ts = event.time.astimezone(timezone.utc).replace(microsecond=0)
        event = event.model_copy(update={"time": ts})
        day = truncate_day(ts)

        self.repo.save(owner_id, event, codec.to_epoch(day))
        logger.debug("Saved recognition %s for %s in day %s", event.id, owner_id, day.date())
        return event

    def load_recognition(self, event_id: str) -> RecognitionEvent:
        """Return the stored event. Raises `NotFound` if absent."""

        return self.repo.load_event(event_id)

    def load_recognition_day(self, owner_id: str, day: datetime) -> DayAggregate:
        """Return the aggregate of the UTC day containing `day`.

        Raises `NotFound` if no event was ever recorded for that bucket.
        """

        _require_owner(owner_id)
        return self.repo.load_day(owner_id, codec.to_epoch(truncate_day(day)))

    def list_recognitions(self, owner_id: str) -> List[RecognitionEvent]:
        """All events of `owner_id`, ascending by event time."""

        _require_owner(owner_id)
        return [self.load_recognition(i) for i in self.repo.event_ids(owner_id)]

    def list_recognition_days(self, owner_id: str) -> List[DayAggregate]:
        """All day aggregates of `owner_id`, ascending by day."""

        _require_owner(owner_id)
        return [
            self.load_recognition_day(owner_id, codec.from_epoch(d))
            for d in self.repo.days(owner_id)
        ]

    def health_check(self) -> None:
        """Perform a lightweight store ping via the repository."""

        self.repo.ping()
