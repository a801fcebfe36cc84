import os
import sys
from datetime import datetime, timezone

import fakeredis
import pytest

# Backend modules are imported flat, the way they import each other
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from models import RecognitionEvent  # noqa: E402
from repo_recognitions import RecognitionRepo  # noqa: E402
from service_recognitions import RecognitionService  # noqa: E402


@pytest.fixture
def client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def repo(client):
    return RecognitionRepo(client)


@pytest.fixture
def svc(repo):
    return RecognitionService(repo)


def utc(year, month, day, hour=0, minute=0, second=0):
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def make_event(
    time: datetime,
    amount: int = 100,
    verified: bool = False,
    app_id: str = "app-1",
    document_type: str = "Passport",
) -> RecognitionEvent:
    return RecognitionEvent(
        time=time,
        amount=amount,
        app_id=app_id,
        document_type=document_type,
        verified=verified,
    )
