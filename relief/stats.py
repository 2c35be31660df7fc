from decimal import Decimal, ROUND_HALF_UP

from .constants import CLASS_LIST, UNKNOWN_ABSENTEE
from .schedule import sorted_by_start


def _pct(part: int, total: int, places: int = 0):
    """Percentage of ``part`` in ``total`` rounded half-up; 0 when total is 0."""
    if not total:
        return 0
    value = Decimal(part) * 100 / Decimal(total)
    if places == 0:
        return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return float(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def _split(records, places):
    total = len(records)
    relief_count = sum(1 for r in records if r.is_relief)
    subject_count = total - relief_count
    return {
        'total': total,
        'relief_count': relief_count,
        'subject_count': subject_count,
        'relief_pct': _pct(relief_count, total, places),
        'subject_pct': _pct(subject_count, total, places),
    }


def daily_class_stats(class_name, day_records):
    return _split([r for r in day_records if r.class_name == class_name], 0)


def daily_class_breakdown(day_records, classes=CLASS_LIST):
    return [(cls, daily_class_stats(cls, day_records)) for cls in classes]


def daily_overall_stats(day_records):
    return _split(list(day_records), 1)


def group_reliefs_by_absentee(day_records):
    """Relief records grouped by the absent teacher, keys sorted by name.

    Each group is ordered by start time. Records without an absent teacher
    are collected under the placeholder name.
    """
    groups = {}
    for r in day_records:
        if not r.is_relief:
            continue
        groups.setdefault(r.original_teacher_name or UNKNOWN_ABSENTEE, []).append(r)
    return {name: sorted_by_start(groups[name]) for name in sorted(groups)}


def range_records(start_date, end_date, records):
    # ISO dates are fixed width, so string comparison orders them correctly
    return [r for r in records if start_date <= r.date <= end_date]


def range_stats(start_date, end_date, records):
    return _split(range_records(start_date, end_date, records), 1)


def per_class_range_breakdown(start_date, end_date, records, classes=CLASS_LIST):
    in_range = range_records(start_date, end_date, records)
    rows = []
    for cls in classes:
        stats = _split([r for r in in_range if r.class_name == cls], 0)
        rows.append({
            'class_name': cls,
            'total': stats['total'],
            'subject_count': stats['subject_count'],
            'relief_count': stats['relief_count'],
            'subject_pct': stats['subject_pct'],
        })
    return rows


def sorted_relief_list(start_date, end_date, records):
    """Relief records in range as (sequence number, record), by date then start time."""
    reliefs = [r for r in range_records(start_date, end_date, records) if r.is_relief]
    reliefs.sort(key=lambda r: (r.date, r.start_time))
    return list(enumerate(reliefs, 1))
