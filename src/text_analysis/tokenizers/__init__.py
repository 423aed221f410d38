"""Character-stream tokenizers."""

from .base import CharacterSource, CharacterTokenizer, DEFAULT_BUFFER_SIZE, tokenize_text
from .basic import BasicTokenizer, PredicateTokenizer, is_punctuation
from .registry import available_tokenizers, get_tokenizer, register_tokenizer

__all__ = [
    "CharacterSource",
    "CharacterTokenizer",
    "DEFAULT_BUFFER_SIZE",
    "BasicTokenizer",
    "PredicateTokenizer",
    "is_punctuation",
    "tokenize_text",
    "available_tokenizers",
    "get_tokenizer",
    "register_tokenizer",
]
