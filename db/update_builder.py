"""
db/update_builder.py
--------------------
Builds the SET clause of an UPDATE statement from a field -> value mapping.
Only whitelisted column names ever reach the statement text; every value
is bound through a placeholder.
"""

from typing import Any, Iterable, Mapping

from models.customer import COLUMNS
from utils.errors import ValidationError


def build_update_clause(
    updates: Mapping[str, Any],
    allowed_columns: Iterable[str] = COLUMNS,
) -> tuple[str, list]:
    """
    Convert ``{column: value}`` into ``('"A" = %s, "B" = %s', [a, b])``.

    Columns keep the iteration order of ``updates``. The caller appends the
    key value for its WHERE clause to the returned parameter list.

    Raises:
        ValidationError: If ``updates`` is empty or names unknown columns.
    """
    if not updates:
        raise ValidationError("No fields to update")

    allowed = set(allowed_columns)
    unknown = [name for name in updates if name not in allowed]
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}")

    clause = ", ".join(f'"{name}" = %s' for name in updates)
    return clause, list(updates.values())
