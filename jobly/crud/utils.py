"""
Helpers shared by the CRUD modules.
"""

from typing import Any, List, Mapping, Tuple

from jobly.core.exceptions import BadRequestError


def build_update_values(data: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """
    Turn a sparse mapping of fields into (column, value) pairs for an UPDATE.

    Fields whose value is None are treated as absent.

    Args:
        data: Fields to update, keyed by column name

    Returns:
        List of (column, value) pairs in the order of ``data``

    Raises:
        BadRequestError: If no field is present
    """
    values = [(column, value) for column, value in data.items() if value is not None]

    if not values:
        raise BadRequestError("No data")

    return values
