from relief.constants import CLASS_LIST, UNKNOWN_ABSENTEE
from relief.records import ReliefSession, SubjectSession
from relief.stats import (
    daily_class_breakdown,
    daily_class_stats,
    daily_overall_stats,
    group_reliefs_by_absentee,
    per_class_range_breakdown,
    range_records,
    range_stats,
    sorted_relief_list,
)

_seq = iter(range(1, 10_000))


def subject(cls="TAHUN 1", date="2023-10-24", start="08:00", end="08:30"):
    return SubjectSession(id=str(next(_seq)), date=date, teacher_name="GURU SUBJEK", class_name=cls,
                          subject="SCIENCE", start_time=start, end_time=end, timestamp=0)


def relief(cls="TAHUN 1", date="2023-10-24", start="08:00", end="08:30", absent="BEREMAS ANAK INGGIT"):
    return ReliefSession(id=str(next(_seq)), date=date, teacher_name="GURU GANTI", class_name=cls,
                         subject="SCIENCE", start_time=start, end_time=end, timestamp=0,
                         original_teacher_name=absent, relief_reason="Kursus / Bengkel")


ZERO = {'total': 0, 'relief_count': 0, 'subject_count': 0, 'relief_pct': 0, 'subject_pct': 0}


def test_zero_guard_everywhere():
    assert daily_class_stats("TAHUN 1", []) == ZERO
    assert daily_overall_stats([]) == ZERO
    assert range_stats("2023-01-01", "2023-12-31", []) == ZERO
    assert per_class_range_breakdown("2023-01-01", "2023-12-31", [])[0] == {
        'class_name': 'TAHUN 1', 'total': 0, 'subject_count': 0, 'relief_count': 0, 'subject_pct': 0,
    }


def test_class_stats_round_to_whole_percent():
    recs = [subject(), subject(), relief(), subject("TAHUN 2")]
    stats = daily_class_stats("TAHUN 1", recs)
    assert stats == {'total': 3, 'relief_count': 1, 'subject_count': 2, 'relief_pct': 33, 'subject_pct': 67}


def test_class_stats_round_half_up():
    recs = [relief()] + [subject() for _ in range(7)]
    stats = daily_class_stats("TAHUN 1", recs)
    # 12.5% rounds up, 87.5% rounds up
    assert stats['relief_pct'] == 13
    assert stats['subject_pct'] == 88


def test_overall_stats_one_decimal():
    recs = [relief(), subject(), subject()]
    stats = daily_overall_stats(recs)
    assert stats['relief_pct'] == 33.3
    assert stats['subject_pct'] == 66.7
    recs = [relief()] + [subject() for _ in range(15)]
    assert daily_overall_stats(recs)['relief_pct'] == 6.3


def test_counts_always_add_up():
    recs = [subject("TAHUN 1"), relief("TAHUN 1"), relief("TAHUN 4", date="2023-10-25"),
            subject("TAHUN 6", date="2023-11-01")]
    for _, s in daily_class_breakdown(recs):
        assert s['subject_count'] + s['relief_count'] == s['total']
    s = daily_overall_stats(recs)
    assert s['subject_count'] + s['relief_count'] == s['total'] == 4
    s = range_stats("2023-10-24", "2023-10-31", recs)
    assert s['subject_count'] + s['relief_count'] == s['total'] == 3
    for row in per_class_range_breakdown("2023-10-24", "2023-10-31", recs):
        assert row['subject_count'] + row['relief_count'] == row['total']


def test_daily_class_breakdown_covers_every_class():
    out = daily_class_breakdown([subject("TAHUN 3")])
    assert [cls for cls, _ in out] == list(CLASS_LIST)
    assert dict(out)["TAHUN 3"]['total'] == 1


def test_group_single_absentee():
    recs = [subject(), relief(absent="BEREMAS ANAK INGGIT")]
    groups = group_reliefs_by_absentee(recs)
    assert list(groups) == ["BEREMAS ANAK INGGIT"]
    assert len(groups["BEREMAS ANAK INGGIT"]) == 1


def test_group_ordering_and_placeholder():
    late = relief(absent="YII CHIN SIEW", start="11:00", end="11:30")
    early = relief(absent="YII CHIN SIEW", start="08:00", end="08:30")
    other = relief(absent="BEREMAS ANAK INGGIT")
    nameless = relief(absent="")
    groups = group_reliefs_by_absentee([late, other, early, nameless])
    assert list(groups) == sorted(["YII CHIN SIEW", "BEREMAS ANAK INGGIT", UNKNOWN_ABSENTEE])
    assert groups["YII CHIN SIEW"] == [early, late]
    assert groups[UNKNOWN_ABSENTEE] == [nameless]


def test_range_is_inclusive():
    a = subject(date="2023-10-24")
    b = subject(date="2023-10-26")
    c = subject(date="2023-10-27")
    assert range_records("2023-10-24", "2023-10-26", [a, b, c]) == [a, b]
    assert range_records("2023-10-26", "2023-10-26", [a, b, c]) == [b]
    assert range_records("2023-10-28", "2023-10-24", [a, b, c]) == []


def test_per_class_range_breakdown():
    recs = [subject("TAHUN 5"), subject("TAHUN 5"), relief("TAHUN 5"), relief("TAHUN 2", date="2024-01-01")]
    rows = per_class_range_breakdown("2023-10-01", "2023-10-31", recs)
    assert [r['class_name'] for r in rows] == list(CLASS_LIST)
    t5 = rows[CLASS_LIST.index("TAHUN 5")]
    assert t5 == {'class_name': 'TAHUN 5', 'total': 3, 'subject_count': 2, 'relief_count': 1, 'subject_pct': 67}
    assert rows[CLASS_LIST.index("TAHUN 2")]['total'] == 0


def test_sorted_relief_list_orders_by_date_then_time():
    r1 = relief(date="2023-10-25", start="08:00")
    r2 = relief(date="2023-10-24", start="11:00")
    r3 = relief(date="2023-10-24", start="07:30")
    s = subject(date="2023-10-24")
    out = sorted_relief_list("2023-10-24", "2023-10-25", [r1, s, r2, r3])
    assert out == [(1, r3), (2, r2), (3, r1)]
