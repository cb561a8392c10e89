"""Text utilities (normalization + similarity)."""

from .normalization import normalize
from .similarity import SCORERS, get_scorer, similarity

__all__ = [
    "normalize",
    "SCORERS",
    "get_scorer",
    "similarity",
]
