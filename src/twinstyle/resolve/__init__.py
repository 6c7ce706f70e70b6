from twinstyle.resolve.coerce import check_new_style, styleify
from twinstyle.resolve.styles import is_empty, resolve, resolve_style

__all__ = ["check_new_style", "is_empty", "resolve", "resolve_style", "styleify"]
