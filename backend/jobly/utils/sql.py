import re
from collections.abc import Mapping
from typing import Any, NamedTuple

from jobly.errors import ValidationError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SetClause(NamedTuple):
    set_cols: str
    values: list[Any]


def placeholder(position: int) -> str:
    return f"${position}"


def sql_for_partial_update(data: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> SetClause:
    """Turn a partial update into the body of an UPDATE ... SET clause.

    ``data`` maps field names to their new values; a ``None`` value sets the
    column to NULL. ``js_to_sql`` renames fields whose column name differs.
    Placeholders are numbered from 1 in the order of ``data``; the caller
    binds anything else (e.g. the row key) at ``len(values) + 1``.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        SetClause(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])

    Raises ValidationError when ``data`` is empty or a column name is not a
    plain identifier.
    """
    if not data:
        raise ValidationError("No data")

    cols = []
    for idx, field in enumerate(data, start=1):
        column = js_to_sql.get(field, field)
        if not _IDENTIFIER.match(column):
            raise ValidationError(f"Invalid field: {field}")
        cols.append(f'"{column}"={placeholder(idx)}')

    return SetClause(set_cols=", ".join(cols), values=list(data.values()))


LIKE_ESCAPE = "ESCAPE '\\'"


def contains_pattern(value: str) -> str:
    """LIKE pattern matching ``value`` literally anywhere; pair with LIKE_ESCAPE."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
