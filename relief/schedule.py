from datetime import date

from .constants import (
    CLASS_LIST,
    DAY_NAMES,
    DEFAULT_DAY,
    LOWER_PRIMARY,
    TIME_SLOTS,
    UPPER_PRIMARY,
)

LOWER = "lower"
UPPER = "upper"

EPSILON = 0.001

# Start of the first blacked-out slot, in fractional hours
T_11_20 = 11 + 20 / 60
T_12_20 = 12 + 20 / 60
T_13_20 = 13 + 20 / 60
ALL_DAY = 0.0

# None means the tier runs the full day on that weekday
BLACKOUT_THRESHOLDS = {
    LOWER: {
        "ISNIN": T_13_20,
        "SELASA": T_13_20,
        "RABU": T_13_20,
        "KHAMIS": T_12_20,
        "JUMAAT": T_11_20,
        "SABTU": ALL_DAY,
        "AHAD": ALL_DAY,
    },
    UPPER: {
        "ISNIN": None,
        "SELASA": T_13_20,
        "RABU": T_13_20,
        "KHAMIS": T_13_20,
        "JUMAAT": T_11_20,
        "SABTU": ALL_DAY,
        "AHAD": ALL_DAY,
    },
}


def class_tier(class_name):
    if class_name in LOWER_PRIMARY:
        return LOWER
    if class_name in UPPER_PRIMARY:
        return UPPER
    return None


def hours(time_value: str) -> float:
    """'13:20' -> 13.333..."""
    h, m = time_value.split(":")
    return int(h) + int(m) / 60


def day_name(date_str) -> str:
    """Malay day label for an ISO date; unparseable input falls back to ISNIN."""
    try:
        d = date.fromisoformat(str(date_str))
    except (TypeError, ValueError):
        return DEFAULT_DAY
    return DAY_NAMES[d.isoweekday() % 7]


def is_blacked_out(class_name: str, weekday: str, slot_start: str) -> bool:
    """True when ``slot_start`` falls after the class tier's school day on ``weekday``."""
    tier = class_tier(class_name)
    if tier is None:
        return False
    threshold = BLACKOUT_THRESHOLDS[tier].get(weekday)
    if threshold is None:
        return False
    return hours(slot_start) >= threshold - EPSILON


def records_for_date(records, date_str):
    return [r for r in records if r.date == date_str]


def sorted_by_start(records):
    return sorted(records, key=lambda r: r.start_time)


def occupants(class_name, slot_start, day_records):
    """Records of ``class_name`` whose [start, end) interval covers ``slot_start``."""
    return [
        r for r in day_records
        if r.class_name == class_name and r.start_time <= slot_start < r.end_time
    ]


def build_timetable(day_records, weekday, classes=CLASS_LIST, slots=TIME_SLOTS):
    """Grid rows for the dashboard, one per class.

    Each cell is a dict with ``kind`` in {'recess', 'blackout', 'open'};
    open cells list their occupants.
    """
    rows = []
    for cls in classes:
        cells = []
        for slot in slots:
            if slot.recess:
                cells.append({'slot': slot, 'kind': 'recess', 'records': []})
            elif is_blacked_out(cls, weekday, slot.start):
                cells.append({'slot': slot, 'kind': 'blackout', 'records': []})
            else:
                cells.append({
                    'slot': slot,
                    'kind': 'open',
                    'records': occupants(cls, slot.start, day_records),
                })
        rows.append({'class_name': cls, 'cells': cells})
    return rows
