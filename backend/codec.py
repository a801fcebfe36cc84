"""
Encode/decode boundary between models and flat Redis hashes.

Redis hashes only hold strings, so every field has an explicit encoder
and decoder here. Instants are stored as integer epoch seconds (UTC),
integers in decimal and booleans as `true` / `false`. Decoding is
strict: a missing field or unparsable value raises `CorruptRecord`.

Key layout:
- `recognition:{id}` — event hash
- `user:{owner}:recognitions` — event index (zset, score = time)
- `user:{owner}:recognitions:day:{day}` — day aggregate hash
- `user:{owner}:recognitions:days` — day index (zset, score = day)
"""

from datetime import datetime, timezone
from typing import Callable, Dict, Mapping

from errors import CorruptRecord
from models import DayAggregate, RecognitionEvent


def recognition_key(event_id: str) -> str:
    return f"recognition:{event_id}"


def event_index_key(owner_id: str) -> str:
    return f"user:{owner_id}:recognitions"


def day_key(owner_id: str, day: int) -> str:
    return f"user:{owner_id}:recognitions:day:{day}"


def day_index_key(owner_id: str) -> str:
    return f"user:{owner_id}:recognitions:days"


def to_epoch(value: datetime) -> int:
    return int(value.timestamp())


def from_epoch(value: int) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)


def _decode_int(raw: str) -> int:
    return int(raw)


def _decode_time(raw: str) -> datetime:
    return from_epoch(int(raw))


def _decode_bool(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _decode_str(raw: str) -> str:
    return raw


EVENT_SCHEMA: Dict[str, Callable[[str], object]] = {
    "id": _decode_str,
    "time": _decode_time,
    "amount": _decode_int,
    "user_id": _decode_str,
    "app_id": _decode_str,
    "document_id": _decode_str,
    "document_type": _decode_str,
    "verified": _decode_bool,
}

DAY_SCHEMA: Dict[str, Callable[[str], object]] = {
    "time": _decode_time,
    "amount": _decode_int,
    "success": _decode_int,
    "failed": _decode_int,
}


def _decode(key: str, data: Mapping[str, str], schema: Dict[str, Callable[[str], object]]) -> Dict[str, object]:
    out: Dict[str, object] = {}
    for field, decoder in schema.items():
        if field not in data:
            raise CorruptRecord(key, f"missing field '{field}'")
        try:
            out[field] = decoder(data[field])
        except (TypeError, ValueError, OverflowError) as e:
            raise CorruptRecord(key, f"bad value for '{field}': {e}") from e
    return out


def encode_event(event: RecognitionEvent) -> Dict[str, str]:
    """Flatten an event into the string mapping stored under its key."""

    return {
        "id": event.id,
        "time": str(to_epoch(event.time)),
        "amount": str(event.amount),
        "user_id": event.user_id,
        "app_id": event.app_id,
        "document_id": event.document_id,
        "document_type": event.document_type,
        "verified": "true" if event.verified else "false",
    }


def decode_event(key: str, data: Mapping[str, str]) -> RecognitionEvent:
    return RecognitionEvent(**_decode(key, data, EVENT_SCHEMA))


def decode_day(key: str, data: Mapping[str, str]) -> DayAggregate:
    fields = _decode(key, data, DAY_SCHEMA)
    return DayAggregate(
        day=fields["time"],
        amount=fields["amount"],
        success=fields["success"],
        failed=fields["failed"],
    )
