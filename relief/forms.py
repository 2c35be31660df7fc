from django import forms
from django.utils import timezone

from .constants import CLASS_LIST, RELIEF_REASONS

MODE_SUBJECT = 'subject'
MODE_RELIEF = 'relief'
MODE_CHOICES = (
    (MODE_SUBJECT, 'Guru Matapelajaran'),
    (MODE_RELIEF, 'Guru Ganti'),
)

RELIEF_REASON_REQUIRED = "Sila pilih sebab tidak hadir."


def _apply_bootstrap_controls(form):
    """Add Bootstrap classes to widgets for better mobile usability."""
    for name, field in form.fields.items():
        widget = field.widget
        if isinstance(widget, forms.HiddenInput):
            continue
        if isinstance(widget, (forms.Select, forms.SelectMultiple)):
            widget.attrs["class"] = (widget.attrs.get("class", "") + " form-select").strip()
        elif isinstance(widget, forms.RadioSelect):
            widget.attrs["class"] = (widget.attrs.get("class", "") + " btn-check").strip()
        else:
            widget.attrs["class"] = (widget.attrs.get("class", "") + " form-control").strip()


def _today():
    return timezone.localdate()


class TeachingRecordForm(forms.Form):
    mode = forms.ChoiceField(choices=MODE_CHOICES, initial=MODE_SUBJECT, widget=forms.RadioSelect)
    date = forms.DateField(initial=_today, widget=forms.DateInput(attrs={'type': 'date'}))
    teacher_name = forms.CharField(max_length=150, label='Nama Guru')
    original_teacher_name = forms.CharField(max_length=150, required=False, label='Guru Tidak Hadir')
    relief_reason = forms.ChoiceField(
        choices=[('', '-- Pilih Sebab --')] + [(r, r) for r in RELIEF_REASONS],
        required=False,
        label='Sebab Tidak Hadir',
    )
    class_name = forms.ChoiceField(
        choices=[('', '-- Pilih Kelas --')] + [(c, c) for c in CLASS_LIST],
        label='Kelas',
    )
    subject = forms.CharField(max_length=150, label='Matapelajaran')
    start_time = forms.TimeField(input_formats=['%H:%M'], widget=forms.TimeInput(format='%H:%M', attrs={'type': 'time'}), label='Masa Mula')
    end_time = forms.TimeField(input_formats=['%H:%M'], widget=forms.TimeInput(format='%H:%M', attrs={'type': 'time'}), label='Masa Tamat')
    notes = forms.CharField(max_length=500, required=False, widget=forms.Textarea(attrs={'rows': 2}), label='Catatan')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Free text with suggestions from the datalists in the template
        self.fields['teacher_name'].widget.attrs.update({'list': 'teacher-list', 'autocomplete': 'off'})
        self.fields['original_teacher_name'].widget.attrs.update({'list': 'teacher-list', 'autocomplete': 'off'})
        self.fields['subject'].widget.attrs.update({'list': 'subject-list', 'autocomplete': 'off'})
        _apply_bootstrap_controls(self)

    def clean(self):
        cleaned = super().clean()
        if cleaned.get('mode') == MODE_RELIEF:
            if not cleaned.get('original_teacher_name'):
                self.add_error('original_teacher_name', 'Sila isi nama guru yang tidak hadir.')
            if not cleaned.get('relief_reason'):
                raise forms.ValidationError(RELIEF_REASON_REQUIRED)
        return cleaned

    @property
    def is_relief(self) -> bool:
        return self.cleaned_data.get('mode') == MODE_RELIEF

    def record_fields(self) -> dict:
        """Store fields for the validated submission, ready for ``RecordStore.add``."""
        data = self.cleaned_data
        fields = {
            'date': data['date'].isoformat(),
            'teacher_name': data['teacher_name'].strip(),
            'class_name': data['class_name'],
            'subject': data['subject'].strip(),
            'start_time': data['start_time'].strftime('%H:%M'),
            'end_time': data['end_time'].strftime('%H:%M'),
            'notes': data.get('notes', '').strip(),
        }
        if self.is_relief:
            fields['original_teacher_name'] = data['original_teacher_name'].strip()
            fields['relief_reason'] = data['relief_reason']
        return fields


class AdminLoginForm(forms.Form):
    username = forms.CharField(max_length=150)
    password = forms.CharField(widget=forms.PasswordInput(render_value=False))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        _apply_bootstrap_controls(self)


class ReportRangeForm(forms.Form):
    start = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}), label='Tarikh Mula')
    end = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}), label='Tarikh Tamat')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        _apply_bootstrap_controls(self)
