from django import template

register = template.Library()


@register.filter(name='pct')
def pct(value):
    """Format a percentage: whole numbers without decimals, others to one place."""
    try:
        num = float(value)
    except (TypeError, ValueError):
        return "0%"
    if num == int(num):
        return f"{int(num)}%"
    return f"{num:.1f}%"


@register.filter(name='time_range')
def time_range(record):
    return f"{record.start_time} - {record.end_time}"


@register.filter(name='status_badge')
def status_badge(record):
    """Bootstrap badge class for a record's status."""
    return 'text-bg-warning' if getattr(record, 'is_relief', False) else 'text-bg-success'


@register.filter(name='or_dash')
def or_dash(value):
    return value if value else '-'
