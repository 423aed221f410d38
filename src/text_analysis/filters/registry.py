"""Filter registry.

Filters are configured by name in the `filters:` list of the YAML config and
are chained in the listed order.

Built-in names:
- lowercase
- stopwords   (needs a stop-word list)
- min_length  (needs a threshold)
"""

from __future__ import annotations
from functools import reduce
from typing import Callable, Dict, Iterable, List, Optional

from ..errors import ConfigError
from .base import Filter
from .impl import LowercaseFilter, MinLengthFilter, StopWordFilter


def make_filters(
    filter_names: Iterable[str],
    *,
    stopwords: Optional[Iterable[str]] = None,
    ignore_case: bool = False,
    min_length: Optional[int] = None,
) -> List[Filter]:
    """
    Create token filters from configuration.

    Args:
        filter_names: Filter names, in pipeline order
        stopwords: Words excluded by the `stopwords` filter
        ignore_case: Case-insensitive stop-word comparison
        min_length: Threshold for the `min_length` filter
    """
    def _stopwords() -> Filter:
        if stopwords is None:
            raise ConfigError("filter 'stopwords' requires a stop-word list")
        return StopWordFilter(stopwords, ignore_case=ignore_case)

    def _min_length() -> Filter:
        if min_length is None:
            raise ConfigError("filter 'min_length' requires min_length")
        return MinLengthFilter(min_length)

    name_to_filter: Dict[str, Callable[[], Filter]] = {
        "lowercase": LowercaseFilter,
        "stopwords": _stopwords,
        "min_length": _min_length,
    }

    filters = []
    for n in filter_names:
        if n not in name_to_filter:
            raise ConfigError(f"Unknown filter: {n}. Register it in text_analysis.filters.registry")
        filters.append(name_to_filter[n]())
    return filters


def chain_filters(filters: Iterable[Filter]) -> Optional[Filter]:
    """Fold filters left to right into one chain; None if there are none."""
    filters = list(filters)
    if not filters:
        return None
    return reduce(lambda source, sink: source.chain(sink), filters)
