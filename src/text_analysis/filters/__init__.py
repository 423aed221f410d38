"""Stream filters and filter chaining."""

from .base import Filter, FilterChain
from .impl import LowercaseFilter, MinLengthFilter, StopWordFilter
from .ngram import NGramFilter
from .registry import chain_filters, make_filters

__all__ = [
    "Filter",
    "FilterChain",
    "LowercaseFilter",
    "MinLengthFilter",
    "StopWordFilter",
    "NGramFilter",
    "chain_filters",
    "make_filters",
]
