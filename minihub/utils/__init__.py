from .filters import timeago_filter, markdown_filter, is_markdown

__all__ = ['timeago_filter', 'markdown_filter', 'is_markdown']
