from .constants import STATUS_RELIEF, STATUS_SUBJECT

# Example entries written to an empty store on first load
EXAMPLE_RECORDS = [
    {"id": "1", "date": "2023-10-24", "teacherName": "JULAIHEI @ JULAIHI BIN MAHDI", "className": "TAHUN 5",
     "subject": "SCIENCE", "startTime": "08:00", "endTime": "08:30", "status": STATUS_SUBJECT,
     "timestamp": 1698105600000},
    {"id": "2", "date": "2023-10-24", "teacherName": "HASIAH BINTI SALLEH", "originalTeacherName": "BEREMAS ANAK INGGIT",
     "className": "TAHUN 4", "subject": "MATHEMATICS", "startTime": "09:00", "endTime": "09:30",
     "status": STATUS_RELIEF, "timestamp": 1698109200000},
    {"id": "3", "date": "2023-10-24", "teacherName": "VOON CHUN WEI", "originalTeacherName": "YII CHIN SIEW",
     "className": "TAHUN 3", "subject": "SEJARAH", "startTime": "10:30", "endTime": "11:00",
     "status": STATUS_RELIEF, "timestamp": 1698114600000},
    {"id": "4", "date": "2023-10-25", "teacherName": "SYLVIA LEE MEI BAY", "className": "TAHUN 5",
     "subject": "ENGLISH", "startTime": "07:30", "endTime": "08:00", "status": STATUS_SUBJECT,
     "timestamp": 1698192000000},
    {"id": "5", "date": "2023-10-25", "teacherName": "BEREMAS ANAK INGGIT",
     "originalTeacherName": "JULAIHEI @ JULAIHI BIN MAHDI", "className": "TAHUN 5", "subject": "SCIENCE",
     "startTime": "11:00", "endTime": "11:30", "status": STATUS_RELIEF, "timestamp": 1698204600000},
    {"id": "6", "date": "2023-10-26", "teacherName": "JULAIHEI @ JULAIHI BIN MAHDI", "originalTeacherName": "VOON CHUN WEI",
     "className": "TAHUN 1", "subject": "PENDIDIKAN JASMANI", "startTime": "08:00", "endTime": "08:30",
     "status": STATUS_RELIEF, "timestamp": 1698282000000},
]
