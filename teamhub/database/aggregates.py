"""
Partial upserts of aggregate documents.

An aggregate is one row with many independently replaceable columns,
keyed by a unique business key. ``upsert_partial`` sends only the columns
the caller supplied, with ``default_to_null=False`` so PostgREST issues a
single ``INSERT ... ON CONFLICT (key) DO UPDATE`` that

* sets the supplied columns,
* keeps every other column of an existing row as it is,
* falls back to the column defaults when the row is new.

The store evaluates this against the row as it exists when the statement
runs, so concurrent upserts never interleave column by column.
"""
from pydantic import BaseModel
from typing import Any, Dict, Iterable, Optional


def supplied_fields(data: BaseModel, exclude: Iterable[str] = ()) -> Dict[str, Any]:
    """Fields the caller actually sent. Explicit nulls count as omitted."""
    skip = set(exclude)
    return {
        k: v for k, v in data.model_dump(mode="json", exclude_unset=True, exclude_none=True).items()
        if k not in skip
    }


def upsert_partial(supabase, table: str, key: Dict[str, Any], fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Insert-or-update ``fields`` on the row identified by ``key``; returns the stored row."""
    payload = {**fields, **key}
    result = supabase.table(table).upsert(
        payload,
        on_conflict=",".join(key.keys()),
        default_to_null=False,
    ).execute()
    return result.data[0] if result.data else None
