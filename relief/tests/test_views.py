import json

import pytest
from django.urls import reverse

from relief.constants import STATUS_RELIEF, STORAGE_KEY
from relief.forms import RELIEF_REASON_REQUIRED
from relief.models import StoredState
from relief.permissions import SESSION_FLAG
from relief.seed import EXAMPLE_RECORDS
from relief.store import RecordStore


@pytest.fixture
def admin_client(client, settings, db):
    resp = client.post(reverse('relief:login'), {
        'username': settings.MMI_ADMIN_USERNAME,
        'password': settings.MMI_ADMIN_PASSWORD,
    })
    assert resp.status_code == 302
    return client


def _form_data(**overrides):
    data = {
        'mode': 'subject',
        'date': '2023-10-24',
        'teacher_name': 'SYLVIA LEE MEI BAY',
        'class_name': 'TAHUN 5',
        'subject': 'ENGLISH',
        'start_time': '07:30',
        'end_time': '08:00',
        'notes': '',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
def test_dashboard_requires_login(client):
    resp = client.get(reverse('relief:dashboard'))
    assert resp.status_code == 302
    assert resp['Location'].startswith(reverse('relief:login'))


@pytest.mark.django_db
def test_bad_credentials_rejected(client):
    resp = client.post(reverse('relief:login'), {'username': 'sksgsian', 'password': 'wrong'}, follow=True)
    assert b"Username atau password salah." in resp.content
    assert SESSION_FLAG not in client.session


@pytest.mark.django_db
def test_login_sets_flag_and_logout_clears_it(admin_client):
    assert admin_client.session[SESSION_FLAG] is True
    admin_client.post(reverse('relief:logout'))
    assert SESSION_FLAG not in admin_client.session


@pytest.mark.django_db
def test_subject_submission_creates_record(client, settings):
    settings.MMI_SEED_EXAMPLE_DATA = False
    resp = client.post(reverse('relief:record_create'), _form_data())
    assert resp.status_code == 302
    records = RecordStore().load().all()
    assert len(records) == 1
    assert records[0].class_name == 'TAHUN 5'
    assert records[0].start_time == '07:30'
    assert not records[0].is_relief


@pytest.mark.django_db
def test_relief_submission_creates_relief_variant(client, settings):
    settings.MMI_SEED_EXAMPLE_DATA = False
    client.post(reverse('relief:record_create'), _form_data(
        mode='relief', original_teacher_name='BEREMAS ANAK INGGIT', relief_reason='Cuti Sakit',
        notes='Latihan dalam buku',
    ))
    (record,) = RecordStore().load().all()
    assert record.status == STATUS_RELIEF
    assert record.original_teacher_name == 'BEREMAS ANAK INGGIT'
    assert record.relief_reason == 'Cuti Sakit'
    assert record.notes == 'Latihan dalam buku'


@pytest.mark.django_db
def test_relief_without_reason_is_rejected(client, settings):
    settings.MMI_SEED_EXAMPLE_DATA = False
    resp = client.post(reverse('relief:record_create'), _form_data(
        mode='relief', original_teacher_name='BEREMAS ANAK INGGIT', relief_reason='',
    ))
    assert resp.status_code == 200
    assert RELIEF_REASON_REQUIRED.encode() in resp.content
    assert RecordStore().load().all() == []


@pytest.mark.django_db
def test_missing_required_field_creates_nothing(client, settings):
    settings.MMI_SEED_EXAMPLE_DATA = False
    resp = client.post(reverse('relief:record_create'), _form_data(teacher_name=''))
    assert resp.status_code == 200
    assert RecordStore().load().all() == []


@pytest.mark.django_db
def test_dashboard_renders_selected_day(admin_client):
    resp = admin_client.get(reverse('relief:dashboard'), {'date': '2023-10-24'})
    assert resp.status_code == 200
    assert resp.context['weekday'] == 'SELASA'
    assert resp.context['overall']['total'] == 3
    assert resp.context['overall']['relief_count'] == 2
    assert list(resp.context['relief_groups']) == ['BEREMAS ANAK INGGIT', 'YII CHIN SIEW']
    assert b'JULAIHEI @ JULAIHI BIN MAHDI' in resp.content


@pytest.mark.django_db
def test_dashboard_bad_date_falls_back_to_today(admin_client):
    resp = admin_client.get(reverse('relief:dashboard'), {'date': 'garbage'})
    assert resp.status_code == 200


@pytest.mark.django_db
def test_delete_needs_confirmation(admin_client):
    url = reverse('relief:record_delete', args=['2'])
    resp = admin_client.get(url)
    assert resp.status_code == 200
    assert RecordStore().load().get('2') is not None
    resp = admin_client.post(url)
    assert resp.status_code == 302
    assert RecordStore().load().get('2') is None


@pytest.mark.django_db
def test_delete_unknown_record_404(admin_client):
    resp = admin_client.get(reverse('relief:record_delete', args=['missing']))
    assert resp.status_code == 404


@pytest.mark.django_db
def test_reset_needs_confirmation(admin_client):
    admin_client.get(reverse('relief:reset_records'))
    assert RecordStore().load().all()
    admin_client.post(reverse('relief:reset_records'))
    assert RecordStore().load().all() == []


@pytest.mark.django_db
def test_pdf_report(admin_client):
    resp = admin_client.get(reverse('relief:export_report_pdf'), {'start': '2023-10-24', 'end': '2023-10-26'})
    assert resp.status_code == 200
    assert resp['Content-Type'] == 'application/pdf'
    assert 'Laporan_Analisis_MMI_2023-10-24_2023-10-26.pdf' in resp['Content-Disposition']
    assert resp.content.startswith(b'%PDF')


@pytest.mark.django_db
def test_xlsx_report(admin_client):
    resp = admin_client.get(reverse('relief:export_report_xlsx'), {'start': '2023-10-24', 'end': '2023-10-24'})
    assert resp.status_code == 200
    assert 'Laporan_Analisis_MMI_2023-10-24_2023-10-24.xlsx' in resp['Content-Disposition']
    # xlsx files are zip archives
    assert resp.content[:2] == b'PK'


@pytest.mark.django_db
def test_report_requires_both_dates(admin_client):
    resp = admin_client.get(reverse('relief:export_report_pdf'), {'start': '2023-10-24'}, follow=True)
    assert b"Sila pilih Tarikh Mula dan Tarikh Tamat." in resp.content
    assert resp.redirect_chain


@pytest.mark.django_db
def test_report_with_no_records_is_blocked(admin_client):
    resp = admin_client.get(reverse('relief:export_report_pdf'), {'start': '2030-01-01', 'end': '2030-01-31'}, follow=True)
    assert b"Tiada rekod dijumpai dalam julat tarikh ini." in resp.content
    assert resp['Content-Type'].startswith('text/html')


@pytest.mark.django_db
def test_dashboard_skips_records_with_bad_times(admin_client):
    StoredState.objects.update_or_create(key=STORAGE_KEY, defaults={
        "payload": json.dumps([{**EXAMPLE_RECORDS[0], "startTime": None}, EXAMPLE_RECORDS[1]]),
    })
    resp = admin_client.get(reverse('relief:dashboard'), {'date': '2023-10-24'})
    assert resp.status_code == 200
    assert resp.context['overall']['total'] == 1


@pytest.mark.django_db
def test_timetable_entries_link_to_delete(admin_client):
    resp = admin_client.get(reverse('relief:dashboard'), {'date': '2023-10-24'})
    entry_link = reverse('relief:record_delete', args=['1']).encode()
    assert resp.content.count(entry_link) >= 2
