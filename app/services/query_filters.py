from __future__ import annotations

from typing import Any, Iterable

from sqlalchemy import String, cast, func, or_
from sqlalchemy.sql.elements import ColumnElement


_LIKE_ESCAPE = "\\"


def _needle(value: str | None) -> str:
    # Blank means "no filter"; otherwise the query is matched as given.
    if not value or not value.strip():
        return ""
    return value.lower()


def escape_like(value: str) -> str:
    # User input is matched literally; neutralize LIKE wildcards.
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def text_search_filter(model: Any, fields: Iterable[str], q: str | None) -> ColumnElement[bool] | None:
    """Case-insensitive substring match OR-ed across `fields`.

    Returns None for a missing or blank query so callers apply no filter at all.
    """

    needle = _needle(q)
    if not needle:
        return None
    pattern = f"%{escape_like(needle)}%"
    clauses = [func.lower(getattr(model, field)).like(pattern, escape=_LIKE_ESCAPE) for field in fields]
    return or_(*clauses)


def array_contains_prefilter(model: Any, field: str, value: str) -> ColumnElement[bool]:
    """Coarse SQL-side filter for "JSON array `field` contains `value`".

    Matches the quoted id inside the serialized array. It can over-match, so
    callers confirm with `array_contains` on the loaded rows.
    """

    pattern = f'%"{escape_like(value)}"%'
    return cast(getattr(model, field), String).like(pattern, escape=_LIKE_ESCAPE)


def array_contains(record: Any, field: str, value: str) -> bool:
    return value in (getattr(record, field, None) or [])
