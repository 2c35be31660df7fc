"""Attendance record variants and their storage form.

A record is either a ``SubjectSession`` (taught by the assigned subject
teacher) or a ``ReliefSession`` (taught by a substitute). Only the relief
variant carries the absent teacher and the reason for the absence.
"""
from dataclasses import dataclass, field
from typing import Union

from .constants import STATUS_RELIEF, STATUS_SUBJECT


class RecordError(ValueError):
    """Raised when a stored or submitted record cannot be interpreted."""


@dataclass(frozen=True)
class _SessionBase:
    id: str
    date: str
    teacher_name: str
    class_name: str
    subject: str
    start_time: str
    end_time: str
    timestamp: int
    notes: str = ""

    def _common_dict(self):
        data = {
            "id": self.id,
            "date": self.date,
            "teacherName": self.teacher_name,
            "className": self.class_name,
            "subject": self.subject,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "status": self.status,
            "timestamp": self.timestamp,
        }
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass(frozen=True)
class SubjectSession(_SessionBase):
    status: str = field(default=STATUS_SUBJECT, init=False)

    @property
    def is_relief(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return self._common_dict()


@dataclass(frozen=True)
class ReliefSession(_SessionBase):
    original_teacher_name: str = ""
    relief_reason: str = ""
    status: str = field(default=STATUS_RELIEF, init=False)

    @property
    def is_relief(self) -> bool:
        return True

    def to_dict(self) -> dict:
        data = self._common_dict()
        if self.original_teacher_name:
            data["originalTeacherName"] = self.original_teacher_name
        if self.relief_reason:
            data["reliefReason"] = self.relief_reason
        return data


AttendanceRecord = Union[SubjectSession, ReliefSession]

_REQUIRED_KEYS = ("id", "date", "teacherName", "className", "subject", "startTime", "endTime", "status")
_STRING_KEYS = ("date", "className", "startTime", "endTime", "status")


def record_from_dict(data: dict) -> AttendanceRecord:
    """Build the record variant matching ``data['status']``."""
    if not isinstance(data, dict):
        raise RecordError(f"Record must be an object, got {type(data).__name__}")
    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise RecordError(f"Record is missing {', '.join(missing)}")
    wrong = [k for k in _STRING_KEYS if not isinstance(data[k], str)]
    if wrong:
        raise RecordError(f"Record fields must be text: {', '.join(wrong)}")
    common = dict(
        id=str(data["id"]),
        date=data["date"],
        teacher_name=data["teacherName"],
        class_name=data["className"],
        subject=data["subject"],
        start_time=data["startTime"],
        end_time=data["endTime"],
        timestamp=int(data.get("timestamp") or 0),
        notes=data.get("notes") or "",
    )
    status = data["status"]
    if status == STATUS_SUBJECT:
        return SubjectSession(**common)
    if status == STATUS_RELIEF:
        return ReliefSession(
            original_teacher_name=data.get("originalTeacherName") or "",
            relief_reason=data.get("reliefReason") or "",
            **common,
        )
    raise RecordError(f"Unknown record status: {status!r}")


def build_record(*, relief: bool, **fields) -> AttendanceRecord:
    """Create a new record of the requested variant from keyword fields."""
    if relief:
        return ReliefSession(**fields)
    fields.pop("original_teacher_name", None)
    fields.pop("relief_reason", None)
    return SubjectSession(**fields)
