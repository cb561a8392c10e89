"""Utilities package"""

from .coercion import is_number, loosely_equal, number_to_text, to_number
from .traversal import is_composite, iter_entries

__all__ = [
    "is_number",
    "loosely_equal",
    "number_to_text",
    "to_number",
    "is_composite",
    "iter_entries",
]
