"""
Repository: Redis operations for recognition events and day aggregates.

This file contains only store interaction code. It maps models to Redis
hashes through `codec` and turns hashes back into models. Keep business
rules (validation, day truncation) out of this module.

Important notes:
- `save` WATCHes the day hash, checks the running amount still fits a
  signed 64-bit HINCRBY, then sends every write of one event as a single
  MULTI/EXEC, so the record, both index entries and the aggregate change
  together.
- Aggregate counters only move through HINCRBY.
- Connection, timeout and rejected-command failures surface as
  `StoreUnavailable`; a key holding the wrong Redis type as `CorruptRecord`.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

import redis

import codec
from db import get_client
from errors import CorruptRecord, NotFound, StoreUnavailable
from models import DayAggregate, RecognitionEvent

logger = logging.getLogger(__name__)


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


@contextmanager
def _store_call(op: str, key: str) -> Iterator[None]:
    """Translate redis errors raised while touching `key`.

    WRONGTYPE means the key holds another Redis type, which is bad stored
    data. Any other failure or rejected command is the store's problem.
    """

    try:
        yield
    except redis.exceptions.ResponseError as e:
        if "WRONGTYPE" in str(e):
            raise CorruptRecord(key, f"wrong Redis type: {e}") from e
        logger.warning("Store rejected %s on %s: %s", op, key, e)
        raise StoreUnavailable(f"{op} rejected: {e}") from e
    except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
        logger.warning("Store call %s failed: %s", op, e)
        raise StoreUnavailable(f"{op} failed: {e}") from e


class RecognitionRepo:
    """Store access only. No business logic here.

    Responsibilities:
    - Write event records, indexes and day aggregates
    - Read hashes and index ranges, decode via `codec`
    """

    def __init__(self, client: Optional[redis.Redis] = None):
        self.client = client if client is not None else get_client()

    def save(self, owner_id: str, event: RecognitionEvent, day: int) -> None:
        """Persist `event` for `owner_id` and fold it into bucket `day`.

        `day` is the epoch of the event's UTC midnight, computed by the
        service layer. The day hash is WATCHed while its running amount is
        checked, so a save that would overflow HINCRBY writes nothing and
        raises `ValueError`.
        """

        key = codec.day_key(owner_id, day)
        hit, miss = ("success", "failed") if event.verified else ("failed", "success")

        def write(pipe):
            current = pipe.hget(key, "amount")
            try:
                total = int(current or 0) + event.amount
            except ValueError as e:
                raise CorruptRecord(key, f"bad value for 'amount': {e}") from e
            if not INT64_MIN <= total <= INT64_MAX:
                raise ValueError(f"Day amount for {owner_id} would overflow: {total}")

            pipe.multi()
            pipe.hset(codec.recognition_key(event.id), mapping=codec.encode_event(event))
            pipe.zadd(codec.event_index_key(owner_id), {event.id: codec.to_epoch(event.time)})
            pipe.hset(key, "time", day)
            pipe.hincrby(key, "amount", event.amount)
            pipe.hincrby(key, hit, 1)
            pipe.hincrby(key, miss, 0)
            pipe.zadd(codec.day_index_key(owner_id), {str(day): day}, nx=True)

        with _store_call("save", key):
            self.client.transaction(write, key)

    def load_event(self, event_id: str) -> RecognitionEvent:
        key = codec.recognition_key(event_id)
        with _store_call("load_event", key):
            data = self.client.hgetall(key)
        if not data:
            raise NotFound(f"Recognition not found: {event_id}")
        return codec.decode_event(key, data)

    def load_day(self, owner_id: str, day: int) -> DayAggregate:
        key = codec.day_key(owner_id, day)
        with _store_call("load_day", key):
            data = self.client.hgetall(key)
        if not data:
            raise NotFound(f"No recognitions for owner {owner_id} on day {day}")
        return codec.decode_day(key, data)

    def event_ids(self, owner_id: str) -> List[str]:
        """Event ids of `owner_id`, ascending by event time."""

        key = codec.event_index_key(owner_id)
        with _store_call("event_ids", key):
            return list(self.client.zrange(key, 0, -1))

    def days(self, owner_id: str) -> List[int]:
        """Day bucket epochs of `owner_id`, ascending."""

        key = codec.day_index_key(owner_id)
        with _store_call("days", key):
            members = self.client.zrange(key, 0, -1)
        try:
            return [int(m) for m in members]
        except ValueError as e:
            raise CorruptRecord(key, f"bad day member: {e}") from e

    def ping(self) -> None:
        """Lightweight store health check. Raises on error."""

        with _store_call("ping", "PING"):
            self.client.ping()
