"""
Deep removal of absent values from JSON-like trees.
"""
from typing import Any


def omit_nones_deep(value: Any) -> Any:
    """
    Recursively drop dict keys whose value is None and prune list elements.

    Only None is treated as absent: False, 0, "" and empty containers are kept.
    None items inside lists are kept as well, since dropping them would shift
    positions. Applying this twice gives the same result as applying it once.
    """
    if isinstance(value, dict):
        return {
            key: omit_nones_deep(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [omit_nones_deep(item) for item in value]
    return value
