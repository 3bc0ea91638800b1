"""Template filters for Flask"""
from datetime import datetime, timezone
import markdown as md
from markupsafe import Markup

TIME_UNITS = [
    (60, 'minute'),
    (3600, 'hour'),
    (86400, 'day'),
    (2592000, 'month'),
    (31536000, 'year'),
]


def timeago_filter(dt):
    """Convert a datetime or ISO 8601 string to a relative time string (e.g., '2 hours ago')"""
    if not dt:
        return ''

    if isinstance(dt, str):
        dt = datetime.fromisoformat(dt.replace('Z', '+00:00'))

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    seconds = (datetime.now(timezone.utc) - dt).total_seconds()
    if seconds < 60:
        return 'just now'

    # Largest unit that fits wins
    for unit_seconds, unit in reversed(TIME_UNITS):
        if seconds >= unit_seconds:
            count = int(seconds // unit_seconds)
            return f'{count} {unit}{"s" if count != 1 else ""} ago'


def markdown_filter(text):
    """Render Markdown text to HTML"""
    return Markup(md.markdown(text or '', extensions=['fenced_code', 'tables']))


def is_markdown(filename: str) -> bool:
    return filename.lower().endswith(('.md', '.markdown'))
