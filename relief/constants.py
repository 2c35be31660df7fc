from collections import namedtuple

# Storage key for the serialized record collection
STORAGE_KEY = "mmi_records"

STATUS_SUBJECT = "Guru Matapelajaran"
STATUS_RELIEF = "Guru Ganti"
STATUS_CHOICES = (
    (STATUS_SUBJECT, "Guru Matapelajaran"),
    (STATUS_RELIEF, "Guru Ganti"),
)

# Sunday-first, matching date.isoweekday() % 7
DAY_NAMES = ("AHAD", "ISNIN", "SELASA", "RABU", "KHAMIS", "JUMAAT", "SABTU")
DEFAULT_DAY = "ISNIN"

CLASS_LIST = (
    "TAHUN 1",
    "TAHUN 2",
    "TAHUN 3",
    "TAHUN 4",
    "TAHUN 5",
    "TAHUN 6",
)
LOWER_PRIMARY = ("TAHUN 1", "TAHUN 2", "TAHUN 3")
UPPER_PRIMARY = ("TAHUN 4", "TAHUN 5", "TAHUN 6")

Slot = namedtuple("Slot", ["label", "start", "recess"])

TIME_SLOTS = (
    Slot("7.30-8.00", "07:30", False),
    Slot("8.00-8.30", "08:00", False),
    Slot("8.30-9.00", "08:30", False),
    Slot("9.00-9.30", "09:00", False),
    Slot("9.30-10.00", "09:30", False),
    Slot("10.00-10.20", "10:00", True),
    Slot("10.20-10.50", "10:20", False),
    Slot("10.50-11.20", "10:50", False),
    Slot("11.20-11.50", "11:20", False),
    Slot("11.50-12.20", "11:50", False),
    Slot("12.20-12.50", "12:20", False),
    Slot("12.50-1.20", "12:50", False),
    Slot("1.20-1.50", "13:20", False),
)

RECESS_LABEL = "REHAT"
UNKNOWN_ABSENTEE = "Tidak Diketahui"

SUBJECT_LIST = (
    "BAHASA MELAYU",
    "BAHASA INGGERIS",
    "MATHEMATICS",
    "SCIENCE",
    "SEJARAH",
    "PENDIDIKAN ISLAM",
    "PENDIDIKAN MORAL",
    "PENDIDIKAN JASMANI",
    "PENDIDIKAN KESIHATAN",
    "PENDIDIKAN SENI VISUAL",
    "MUZIK",
    "REKA BENTUK DAN TEKNOLOGI",
    "ENGLISH",
)

TEACHER_LIST = (
    "BEREMAS ANAK INGGIT",
    "HASIAH BINTI SALLEH",
    "JULAIHEI @ JULAIHI BIN MAHDI",
    "SYLVIA LEE MEI BAY",
    "VOON CHUN WEI",
    "YII CHIN SIEW",
)

RELIEF_REASONS = (
    "Cuti Sakit",
    "Cuti Rehat Khas",
    "Cuti Kecemasan",
    "Kursus / Bengkel",
    "Urusan Rasmi",
    "Mesyuarat",
    "Lain-lain",
)
