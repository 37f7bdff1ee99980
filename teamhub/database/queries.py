"""
Query helpers shared by the services.

By-value membership inside JSONB collections:

Group members and project members are stored as JSON arrays of member
descriptors (``[{"id": "...", ...}]``). A user is a member when some
descriptor carries their id; the other keys of the descriptor are ignored.
This maps to Postgres' ``@>`` containment operator (PostgREST ``cs``).
"""
import json
from typing import Any, Dict, List, Optional


def member_predicate(member_id: str) -> str:
    """JSONB literal that a members column must contain for ``member_id`` to be present."""
    return json.dumps([{"id": member_id}])


def where_member(query, column: str, member_id: str):
    """Restrict ``query`` to rows whose ``column`` holds a descriptor with ``member_id``."""
    return query.contains(column, member_predicate(member_id))


def merge_rows(*row_sets: List[Dict[str, Any]], key: str = "id") -> List[Dict[str, Any]]:
    """Union of several result sets, first occurrence of each ``key`` wins."""
    seen = set()
    merged = []
    for rows in row_sets:
        for row in rows or []:
            if row[key] in seen:
                continue
            seen.add(row[key])
            merged.append(row)
    return merged


def newest_first(rows: List[Dict[str, Any]], column: str = "created_at") -> List[Dict[str, Any]]:
    return sorted(rows, key=lambda r: r.get(column) or "", reverse=True)


def first_row(result) -> Optional[Dict[str, Any]]:
    return result.data[0] if result.data else None


def escape_like(value: str) -> str:
    """Escape LIKE wildcards. PostgREST also reads ``*`` as ``%``, which cannot be escaped, so re-check matches."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
