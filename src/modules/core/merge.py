"""Field copy rules used by full-replace and partial (merge) updates.

``replace_fields`` copies every listed attribute unconditionally, blanks and
``None`` included.  ``merge_fields`` copies only what the caller actually
supplied:

- text fields apply when they have text (not ``None``, not empty, not
  whitespace-only);
- value fields apply when they are not ``None`` (``0`` is a valid value).
"""

from __future__ import annotations

from typing import Any, Iterable


def has_text(value: Any) -> bool:
    """Return ``True`` when ``value`` is a string with at least one non-space character."""
    return isinstance(value, str) and bool(value.strip())


def replace_fields(target: Any, source: Any, fields: Iterable[str]) -> Any:
    """Overwrite ``fields`` on ``target`` with the values from ``source``."""
    for field in fields:
        setattr(target, field, getattr(source, field))
    return target


def merge_fields(
    target: Any,
    source: Any,
    text_fields: Iterable[str] = (),
    value_fields: Iterable[str] = (),
) -> Any:
    """Overwrite only the supplied fields of ``target``; see module docstring."""
    for field in text_fields:
        value = getattr(source, field)
        if has_text(value):
            setattr(target, field, value)

    for field in value_fields:
        value = getattr(source, field)
        if value is not None:
            setattr(target, field, value)

    return target
