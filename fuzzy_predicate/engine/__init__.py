"""Predicate engine - builder + matcher"""

from .builder import FuzzyPredicate, build_from_options, build_predicate, fuzzy, fuzzy_filter
from .matcher import CandidateKind, classify, matches
from .options import FuzzyOptions

__all__ = [
    "FuzzyPredicate",
    "FuzzyOptions",
    "CandidateKind",
    "build_from_options",
    "build_predicate",
    "classify",
    "fuzzy",
    "fuzzy_filter",
    "matches",
]
