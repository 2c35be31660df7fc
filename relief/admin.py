import json

from django.contrib import admin
from django.utils.html import format_html

from .models import StoredState


@admin.register(StoredState)
class StoredStateAdmin(admin.ModelAdmin):
    list_display = ("key", "entry_count", "updated_at")
    search_fields = ("key",)
    readonly_fields = ("updated_at", "pretty_payload")

    def entry_count(self, obj):
        try:
            data = json.loads(obj.payload)
        except ValueError:
            return '-'
        return len(data) if isinstance(data, list) else '-'
    entry_count.short_description = 'Entries'

    def pretty_payload(self, obj):
        try:
            text = json.dumps(json.loads(obj.payload), ensure_ascii=False, indent=2)
        except ValueError:
            text = obj.payload
        return format_html('<pre style="max-height:30em;overflow:auto">{}</pre>', text)
    pretty_payload.short_description = 'Payload'
