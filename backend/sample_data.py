"""
Synthetic recognition events for demos and manual testing.

`random_event` fills every field the caller leaves out with a fresh
UUID or a random amount. `demo_events` builds the fixed eight-event
scenario used by `/seed` and `scripts/demo.py`: two apps, three UTC
days in August 2020.
"""

import random
from datetime import datetime, timezone
from typing import List, Optional

from models import RecognitionEvent, new_id

MIN_AMOUNT = 100
MAX_AMOUNT = 1000


def random_amount() -> int:
    return random.randint(MIN_AMOUNT, MAX_AMOUNT)


def random_event(
    time: Optional[datetime] = None,
    app_id: Optional[str] = None,
    document_type: str = "Passport",
    verified: bool = False,
) -> RecognitionEvent:
    return RecognitionEvent(
        time=time or datetime.now(timezone.utc),
        amount=random_amount(),
        app_id=app_id or new_id(),
        document_type=document_type,
        verified=verified,
    )


def demo_events(app_id: str, second_app_id: str) -> List[RecognitionEvent]:
    def at(day: int) -> datetime:
        return datetime(2020, 8, day, 1, 0, 0, tzinfo=timezone.utc)

    return [
        random_event(at(17), app_id, "Passport", False),
        random_event(at(18), app_id, "IdCard", True),
        random_event(at(18), app_id, "DriverLicense", False),
        random_event(at(19), app_id, "ProofOfAddress", True),

        random_event(at(17), second_app_id, "Passport", False),
        random_event(at(17), second_app_id, "IdCard", True),
        random_event(at(18), second_app_id, "DriverLicense", False),
        random_event(at(18), second_app_id, "ProofOfAddress", True),
    ]
