import logging
from datetime import date
from io import BytesIO

from django.contrib import messages
from django.http import Http404, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .constants import RECESS_LABEL, SUBJECT_LIST, TEACHER_LIST, TIME_SLOTS
from .forms import AdminLoginForm, ReportRangeForm, TeachingRecordForm
from .permissions import admin_required, check_credentials, grant_admin, revoke_admin
from .reports import report_filename, write_pdf, write_workbook
from .schedule import build_timetable, day_name, sorted_by_start
from .stats import daily_class_breakdown, daily_overall_stats, group_reliefs_by_absentee, range_records
from .store import RecordStore

logger = logging.getLogger(__name__)

LAST_DATE_KEY = 'mmi_last_date'

MSG_RANGE_REQUIRED = "Sila pilih Tarikh Mula dan Tarikh Tamat."
MSG_RANGE_EMPTY = "Tiada rekod dijumpai dalam julat tarikh ini."
MSG_BAD_LOGIN = "Username atau password salah."


def _dashboard_url(view_date=None):
    url = reverse('relief:dashboard')
    return f"{url}?date={view_date}" if view_date else url


def landing(request):
    return render(request, 'relief/landing.html')


def record_create(request):
    if request.method == 'POST':
        form = TeachingRecordForm(request.POST)
        if form.is_valid():
            store = RecordStore()
            record = store.add(relief=form.is_relief, **form.record_fields())
            request.session[LAST_DATE_KEY] = record.date
            label = 'RELIEF' if record.is_relief else 'PENGAJARAN'
            messages.success(request, f'Rekod {label} berjaya dihantar.')
            # A fresh GET gives back an empty form, keeping only the date
            return redirect('relief:record_create')
    else:
        initial = {}
        if request.session.get(LAST_DATE_KEY):
            initial['date'] = request.session[LAST_DATE_KEY]
        form = TeachingRecordForm(initial=initial)
    return render(request, 'relief/record_form.html', {
        'form': form,
        'teacher_list': TEACHER_LIST,
        'subject_list': SUBJECT_LIST,
    })


def admin_login(request):
    next_url = request.POST.get('next') or request.GET.get('next') or ''
    if request.method == 'POST':
        form = AdminLoginForm(request.POST)
        if form.is_valid() and check_credentials(form.cleaned_data['username'], form.cleaned_data['password']):
            grant_admin(request)
            logger.info("Admin login from %s", request.META.get('REMOTE_ADDR', '-'))
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect('relief:dashboard')
        logger.warning("Rejected admin login for %r", request.POST.get('username', ''))
        messages.error(request, MSG_BAD_LOGIN)
        form = AdminLoginForm(initial={'username': request.POST.get('username', '')})
    else:
        form = AdminLoginForm()
    return render(request, 'relief/login.html', {'form': form, 'next': next_url})


@require_POST
def admin_logout(request):
    revoke_admin(request)
    return redirect('relief:landing')


@admin_required
def dashboard(request):
    date_param = request.GET.get('date')
    try:
        if date_param:
            view_date = date.fromisoformat(date_param)
        else:
            view_date = timezone.localdate()
    except ValueError:
        view_date = timezone.localdate()
    selected = view_date.isoformat()

    store = RecordStore().load()
    day_records = store.for_date(selected)
    weekday = day_name(selected)

    context = {
        'view_date': view_date,
        'selected_date': selected,
        'weekday': weekday,
        'slots': TIME_SLOTS,
        'recess_label': RECESS_LABEL,
        'timetable': build_timetable(day_records, weekday),
        'day_records': sorted_by_start(day_records),
        'class_stats': daily_class_breakdown(day_records),
        'overall': daily_overall_stats(day_records),
        'relief_groups': group_reliefs_by_absentee(day_records),
        'report_form': ReportRangeForm(initial={'start': request.GET.get('start'), 'end': request.GET.get('end')}),
        'total_records': len(store.all()),
    }
    return render(request, 'relief/dashboard.html', context)


@admin_required
def record_delete(request, record_id: str):
    store = RecordStore().load()
    record = store.get(record_id)
    if record is None:
        raise Http404("Rekod tidak dijumpai.")
    if request.method == 'POST':
        store.delete(record_id)
        messages.success(request, f'Rekod {record.teacher_name} ({record.class_name}, {record.start_time}) dipadam.')
        return redirect(_dashboard_url(record.date))
    return render(request, 'relief/record_confirm_delete.html', {'record': record})


@admin_required
def reset_records(request):
    store = RecordStore().load()
    if request.method == 'POST':
        count = len(store.all())
        store.reset()
        messages.success(request, f'Semua data telah dipadam ({count} rekod).')
        return redirect('relief:dashboard')
    return render(request, 'relief/reset_confirm.html', {'record_count': len(store.all())})


def _report_range(request):
    """Validated (start, end, records) for an export, or a redirect back to the dashboard."""
    form = ReportRangeForm(request.GET)
    if not form.is_valid() or not form.cleaned_data.get('start') or not form.cleaned_data.get('end'):
        messages.error(request, MSG_RANGE_REQUIRED)
        return None, redirect('relief:dashboard')
    start = form.cleaned_data['start'].isoformat()
    end = form.cleaned_data['end'].isoformat()
    records = range_records(start, end, RecordStore().load().all())
    if not records:
        messages.error(request, MSG_RANGE_EMPTY)
        return None, redirect(f"{reverse('relief:dashboard')}?start={start}&end={end}")
    return (start, end, records), None


@admin_required
def export_report_pdf(request):
    selection, fallback = _report_range(request)
    if fallback is not None:
        return fallback
    start, end, records = selection
    buf = BytesIO()
    write_pdf(buf, start, end, records)
    logger.info("Exported PDF report %s..%s with %d record(s)", start, end, len(records))
    resp = HttpResponse(buf.getvalue(), content_type='application/pdf')
    resp['Content-Disposition'] = f'attachment; filename="{report_filename(start, end, "pdf")}"'
    return resp


@admin_required
def export_report_xlsx(request):
    selection, fallback = _report_range(request)
    if fallback is not None:
        return fallback
    start, end, records = selection
    resp = HttpResponse(content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    resp['Content-Disposition'] = f'attachment; filename="{report_filename(start, end, "xlsx")}"'
    write_workbook(resp, start, end, records)
    logger.info("Exported spreadsheet report %s..%s with %d record(s)", start, end, len(records))
    return resp
