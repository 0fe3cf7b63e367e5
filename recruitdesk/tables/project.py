"""
Row projection.

Turns a raw row plus a header index into a column‑keyed dict.  A full
projection returns every indexed column; a constrained projection
returns only the requested columns.  Missing cells, short rows and
`None` values all read as the empty string.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

NOT_FOUND = "(not found)"


def cell(row: Sequence[object], index: Mapping[str, int], name: str) -> str:
    """Return the stringified value of column `name`, or `""` if absent."""
    position = index.get(name)
    if position is None or position >= len(row):
        return ""
    value = row[position]
    return "" if value is None else str(value)


def project(
    row: Sequence[object],
    index: Mapping[str, int],
    fields: Optional[Sequence[str]] = None,
) -> Dict[str, str]:
    """Project a raw row into a record.

    Args:
        row: Raw ordered cell values.
        index: Header index from `build_index`.
        fields: Optional subset of column names.  When omitted every
            indexed column is returned.

    Returns:
        Dict keyed by column name.
    """
    names = list(index) if fields is None else list(fields)
    return {name: cell(row, index, name) for name in names}


def placeholder(id_field: str, value: object, name_field: str = "FullName") -> Dict[str, str]:
    """Record returned in place of a row whose ID did not resolve."""
    return {id_field: "" if value is None else str(value), name_field: NOT_FOUND}
