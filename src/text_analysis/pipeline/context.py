"""Pipeline configuration model.

PipelineSpec is the typed form of the `count` configuration. It is built
either from a YAML mapping (`PipelineSpec.from_config`) or directly from
command-line options, and consumed by `make_pipeline` / `count_files`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import load_stopwords
from ..errors import ConfigError
from ..tokenizers import DEFAULT_BUFFER_SIZE

DEFAULT_TOP = 10

_KNOWN_KEYS = {"tokenizer", "filters", "stopwords", "min_length", "ngrams", "top"}


@dataclass
class PipelineSpec:
    tokenizer: str = "basic"
    buffer_size: int = DEFAULT_BUFFER_SIZE
    filters: Optional[List[str]] = None  # None -> default_filters()
    stopwords: Optional[List[str]] = None
    ignore_case: bool = False
    min_length: Optional[int] = None
    ngrams: List[int] = field(default_factory=list)  # empty -> count plain tokens
    top: int = DEFAULT_TOP

    def filter_names(self) -> List[str]:
        """Explicit filter list, or the default order: lowercase, stopwords, min_length."""
        if self.filters is not None:
            return list(self.filters)
        names = ["lowercase"]
        if self.stopwords is not None:
            names.append("stopwords")
        if self.min_length is not None:
            names.append("min_length")
        return names

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "PipelineSpec":
        unknown = set(cfg) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        spec = cls()
        tok = cfg.get("tokenizer") or {}
        if isinstance(tok, str):
            tok = {"name": tok}
        if not isinstance(tok, dict):
            raise ConfigError("tokenizer must be a name or a mapping")
        spec.tokenizer = str(tok.get("name", spec.tokenizer))
        spec.buffer_size = _as_int(tok.get("buffer_size", spec.buffer_size), "tokenizer.buffer_size", minimum=1)

        if "filters" in cfg and cfg["filters"] is not None:
            if not isinstance(cfg["filters"], list):
                raise ConfigError("filters must be a list of filter names")
            spec.filters = [str(n) for n in cfg["filters"]]

        sw = cfg.get("stopwords")
        if sw is not None:
            if isinstance(sw, list):
                sw = {"words": sw}
            if not isinstance(sw, dict):
                raise ConfigError("stopwords must be a list or a mapping")
            words: List[str] = [str(w) for w in sw.get("words") or []]
            if sw.get("path"):
                words.extend(load_stopwords(str(sw["path"])))
            spec.stopwords = words
            spec.ignore_case = bool(sw.get("ignore_case", False))

        if cfg.get("min_length") is not None:
            spec.min_length = _as_int(cfg["min_length"], "min_length", minimum=1)

        ngrams = cfg.get("ngrams")
        if ngrams is not None:
            if isinstance(ngrams, int):
                ngrams = [ngrams]
            if not isinstance(ngrams, list):
                raise ConfigError("ngrams must be an integer or a list of integers")
            if not ngrams:
                raise ConfigError("ngrams must list at least one size")
            spec.ngrams = [_as_int(n, "ngrams", minimum=1) for n in ngrams]

        if cfg.get("top") is not None:
            spec.top = _as_int(cfg["top"], "top", minimum=1)
        return spec


def _as_int(value: Any, key: str, minimum: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer (got {value!r})")
    try:
        result = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be an integer (got {value!r})") from e
    if minimum is not None and result < minimum:
        raise ConfigError(f"{key} must be {minimum} or more (got {result})")
    return result
