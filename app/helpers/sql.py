"""
Helper for building partial-update SQL.

Used by the data-access layer to turn a partial update payload into the
SET clause of an UPDATE statement.
"""

from typing import Any, Dict, Mapping, Optional

from app.core.exceptions import BadRequestError


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Build the SET clause and bind values for a partial update.

    Every key of data_to_update produces one '"<column>"=$<n>' clause, numbered
    from 1 in the mapping's iteration order. Keys found in js_to_sql are
    renamed to their column; other keys are used verbatim. None values are
    kept, so a null really is written.

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        {'setCols': '"first_name"=$1, "age"=$2', 'values': ['Aliya', 32]}

    Args:
        data_to_update: Application field name -> new value
        js_to_sql: Application field name -> column name

    Returns:
        {"setCols": <comma-joined clauses>, "values": <values in placeholder order>}

    Raises:
        BadRequestError: If data_to_update is empty
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}
    cols = [f'"{js_to_sql.get(col_name, col_name)}"=${idx}' for idx, col_name in enumerate(keys, start=1)]

    return {
        "setCols": ", ".join(cols),
        "values": [data_to_update[key] for key in keys],
    }
