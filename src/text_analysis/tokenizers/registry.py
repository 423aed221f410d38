"""Tokenizer registry.

Tokenizers are configured by name (`tokenizer.name` in the YAML config).
New tokenizers can be added at runtime with register_tokenizer() without
touching the pipeline builder.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List

from ..errors import ConfigError
from .base import CharacterTokenizer
from .basic import BasicTokenizer

_TOKENIZERS: Dict[str, Callable[..., CharacterTokenizer]] = {
    "basic": BasicTokenizer,
}


def register_tokenizer(name: str, factory: Callable[..., CharacterTokenizer]) -> None:
    _TOKENIZERS[name] = factory


def available_tokenizers() -> List[str]:
    return sorted(_TOKENIZERS)


def get_tokenizer(name: str, **kwargs: Any) -> CharacterTokenizer:
    if name not in _TOKENIZERS:
        raise ConfigError(
            f"Unknown tokenizer: {name}. Register it in text_analysis.tokenizers.registry"
        )
    return _TOKENIZERS[name](**kwargs)
