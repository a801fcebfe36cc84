"""Seed the August 2020 scenario for a fresh owner and print what the store holds.

Run from `backend/`:
    python -m scripts.demo
"""

import logging

from codec import to_epoch
from models import DayAggregate, RecognitionEvent, new_id
from repo_recognitions import RecognitionRepo
from sample_data import demo_events
from service_recognitions import RecognitionService
from settings import settings


def format_event(e: RecognitionEvent) -> str:
    return (
        f"id: {e.id}\ttime: {to_epoch(e.time)}\tamount: {e.amount}\tverified: {str(e.verified).lower()}"
        f"\tapp_id: {e.app_id}\ttype: {e.document_type}"
    )


def format_day(d: DayAggregate) -> str:
    return (
        f"day: {d.day.strftime('%Y-%m-%d')}\ttime: {to_epoch(d.day)}\tamount: {d.amount}"
        f"\tsuccess: {d.success}\tfailed: {d.failed}"
    )


def main():
    logging.basicConfig(level=settings.log_level)
    svc = RecognitionService(RecognitionRepo())

    owner_id = new_id()
    for event in demo_events(new_id(), new_id()):
        svc.save_recognition(owner_id, event)

    recognitions = svc.list_recognitions(owner_id)
    print(f"Number of recognitions: {len(recognitions)}")
    for e in recognitions:
        print(format_event(e))

    days = svc.list_recognition_days(owner_id)
    print(f"Number of recognitions days: {len(days)}")
    for d in days:
        print(format_day(d))


if __name__ == "__main__":
    main()
