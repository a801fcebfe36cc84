import logging
from datetime import date, datetime, timezone
from typing import List

from fastapi import FastAPI, HTTPException

from errors import CorruptRecord, NotFound, StoreUnavailable
from models import DayAggregate, RecognitionEvent, new_id
from repo_recognitions import RecognitionRepo
from sample_data import demo_events
from service_recognitions import RecognitionService
from settings import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Recognition Stats Backend")

# Instantiate the repo + service here so the routes remain thin and
# replaceable for testing (tests swap `svc` for one over a fake store).
repo = RecognitionRepo()
svc = RecognitionService(repo)


def _raise_http(e: Exception, what: str):
    if isinstance(e, NotFound):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, StoreUnavailable):
        raise HTTPException(status_code=503, detail=f"{what} failed: {e}")
    if isinstance(e, CorruptRecord):
        logger.error("%s hit corrupt record %s: %s", what, e.key, e.reason)
        raise HTTPException(status_code=500, detail=str(e))
    if isinstance(e, ValueError):
        raise HTTPException(status_code=400, detail=str(e))
    raise e


@app.get("/health")
def health():
    try:
        svc.health_check()
        return {"ok": True}
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=f"Store health check failed: {e}")

@app.post("/owners/{owner_id}/recognitions")
def save_recognition(owner_id: str, event: RecognitionEvent):
    try:
        saved = svc.save_recognition(owner_id, event)
        return {"id": saved.id}
    except Exception as e:
        _raise_http(e, "Save")

@app.get("/recognitions/{event_id}", response_model=RecognitionEvent)
def load_recognition(event_id: str):
    try:
        return svc.load_recognition(event_id)
    except Exception as e:
        _raise_http(e, "Load")

@app.get("/owners/{owner_id}/recognitions", response_model=List[RecognitionEvent])
def list_recognitions(owner_id: str):
    try:
        return svc.list_recognitions(owner_id)
    except Exception as e:
        _raise_http(e, "List")

@app.get("/owners/{owner_id}/days", response_model=List[DayAggregate])
def list_recognition_days(owner_id: str):
    try:
        return svc.list_recognition_days(owner_id)
    except Exception as e:
        _raise_http(e, "List days")

@app.get("/owners/{owner_id}/days/{day}", response_model=DayAggregate)
def load_recognition_day(owner_id: str, day: date):
    try:
        start = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        return svc.load_recognition_day(owner_id, start)
    except Exception as e:
        _raise_http(e, "Load day")

@app.post("/seed")
def seed(owner_id: str = settings.default_owner):
    events = demo_events(new_id(), new_id())
    try:
        for event in events:
            # NOTE: call the facade/service, NOT the raw repo
            svc.save_recognition(owner_id, event)
    except Exception as e:
        _raise_http(e, "Seed")
    return {"owner_id": owner_id, "inserted": len(events)}
