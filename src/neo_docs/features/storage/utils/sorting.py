"""Sort parameter helpers shared by store implementations."""

import re
from typing import List, Optional, Sequence, Tuple, Union

from ....config.constants import DEFAULT_SORT

FIELD_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_sort(sort: Union[str, Sequence[str], None]) -> List[Tuple[str, bool]]:
    """Parse ``"-created_at,title"`` or ``["-created_at", "title"]``.

    Returns (field, descending) pairs; blank entries are dropped.
    """
    if sort is None:
        return []
    if isinstance(sort, str):
        sort = re.split(r"[,\s]+", sort)

    parsed = []
    for entry in sort:
        entry = (entry or "").strip()
        if not entry:
            continue
        descending = entry.startswith("-")
        field = entry.lstrip("+-")
        if field:
            parsed.append((field, descending))
    return parsed


def restrict_sort(
    sort: Union[str, Sequence[str], None],
    allowed: Optional[Sequence[str]] = None,
) -> List[str]:
    """Drop sort fields outside ``allowed`` and fall back to the default sort."""
    entries = []
    for field, descending in parse_sort(sort):
        if allowed and field not in allowed:
            continue
        if not FIELD_NAME_PATTERN.match(field):
            continue
        entries.append(f"-{field}" if descending else field)
    return entries or list(DEFAULT_SORT)
