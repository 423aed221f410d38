"""Built-in tokenizers.

- BasicTokenizer: splits on whitespace and punctuation
- PredicateTokenizer: classification supplied as a plain callable
"""

from __future__ import annotations
import unicodedata
from typing import Callable

from ..errors import InvalidArgumentError
from .base import CharacterTokenizer, DEFAULT_BUFFER_SIZE


def is_punctuation(ch: str) -> bool:
    """Unicode punctuation: general categories Pc, Pd, Ps, Pe, Pi, Pf, Po."""
    return unicodedata.category(ch).startswith("P")


class BasicTokenizer(CharacterTokenizer):
    name = "basic"

    def is_token_char(self, ch: str) -> bool:
        return not ch.isspace() and not is_punctuation(ch)


class PredicateTokenizer(CharacterTokenizer):
    name = "predicate"

    def __init__(self, predicate: Callable[[str], bool], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if predicate is None:
            raise InvalidArgumentError("predicate must not be None")
        super().__init__(buffer_size)
        self.predicate = predicate

    def is_token_char(self, ch: str) -> bool:
        return bool(self.predicate(ch))
