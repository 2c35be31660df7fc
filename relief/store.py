"""Record store: the ordered collection of attendance records.

The whole collection is persisted as one JSON array in a ``StoredState`` row
and rewritten in full after every mutation. Views build a store per request
and hand it to the helpers that need it.
"""
import json
import logging
import uuid

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from .constants import STORAGE_KEY
from .models import StoredState
from .records import RecordError, build_record, record_from_dict
from .seed import EXAMPLE_RECORDS

logger = logging.getLogger(__name__)


def decode_records(payload: str):
    """Parse a stored payload. Returns None when it is not a JSON array."""
    try:
        raw = json.loads(payload)
    except (TypeError, ValueError):
        return None
    if not isinstance(raw, list):
        return None
    records = []
    for item in raw:
        try:
            records.append(record_from_dict(item))
        except (RecordError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed stored record: %s", exc)
    return records


def encode_records(records) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


class RecordStore:
    def __init__(self, key: str = STORAGE_KEY):
        self.key = key
        self._records = None

    def _fallback(self):
        if getattr(settings, 'MMI_SEED_EXAMPLE_DATA', True):
            return [record_from_dict(item) for item in EXAMPLE_RECORDS]
        return []

    def _read(self, row):
        if row is None:
            return None
        records = decode_records(row.payload)
        if records is None:
            logger.warning("Stored state %r is unreadable; treating it as empty", self.key)
            return self._fallback()
        return records

    def _write(self, records):
        StoredState.objects.update_or_create(key=self.key, defaults={'payload': encode_records(records)})
        self._records = list(records)

    def load(self):
        row = StoredState.objects.filter(key=self.key).first()
        records = self._read(row)
        if records is None:
            records = self._fallback()
            self._write(records)
            logger.info("Initialised record store %r with %d record(s)", self.key, len(records))
        self._records = records
        return self

    def all(self):
        if self._records is None:
            self.load()
        return list(self._records)

    def for_date(self, date_str):
        return [r for r in self.all() if r.date == date_str]

    def get(self, record_id):
        for r in self.all():
            if r.id == record_id:
                return r
        return None

    def _locked_records(self):
        row = StoredState.objects.select_for_update().filter(key=self.key).first()
        if row is None:
            return self._fallback()
        records = decode_records(row.payload)
        if records is None:
            # Only a missing row is seeded; an unreadable one is replaced
            logger.warning("Overwriting unreadable stored state %r", self.key)
            return []
        return records

    def add(self, *, relief: bool, **fields):
        record = build_record(
            relief=relief,
            id=str(uuid.uuid4()),
            timestamp=int(timezone.now().timestamp() * 1000),
            **fields,
        )
        if record.start_time >= record.end_time:
            logger.warning(
                "Record %s for %s has start %s not before end %s",
                record.id, record.class_name, record.start_time, record.end_time,
            )
        with transaction.atomic():
            records = self._locked_records()
            records.append(record)
            self._write(records)
        logger.info("Added %s record %s for %s on %s", record.status, record.id, record.class_name, record.date)
        return record

    def delete(self, record_id) -> bool:
        with transaction.atomic():
            records = self._locked_records()
            kept = [r for r in records if r.id != record_id]
            removed = len(kept) != len(records)
            if removed:
                self._write(kept)
        if removed:
            logger.info("Deleted record %s", record_id)
        return removed

    def reset(self):
        with transaction.atomic():
            self._write([])
        logger.info("Record store %r cleared", self.key)
