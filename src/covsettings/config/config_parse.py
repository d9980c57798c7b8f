# src/covsettings/config/config_parse.py
"""Lenient text parsers for configuration values.

Neither function raises on malformed input: a bad value falls back to
"nothing configured" so an unattended run is never aborted by a typo.
"""


_TRUE = "true"
_FALSE = "false"


def split_element(raw: str | None) -> list[str] | None:
    """Split a comma-separated value into clean tokens.

    Empty and whitespace-only segments are dropped, the rest are stripped
    and kept in their original order.

    Returns None when there is no text at all, otherwise a (possibly empty)
    list.
    """
    if raw is None:
        return None
    return [segment.strip() for segment in raw.split(",") if segment.strip()]


def parse_bool_or_default(raw: str | None, *, default: bool = False) -> bool:
    """Parse ``"true"``/``"false"`` case-insensitively, ignoring surrounding
    whitespace. Anything else yields ``default``.
    """
    if raw is None:
        return default
    value = raw.strip().lower()
    if value == _TRUE:
        return True
    if value == _FALSE:
        return False
    return default
