"""Tokenizer interface.

A tokenizer turns a forward-only character source into a lazy sequence of
string tokens. Subclasses only decide which characters belong to a token:

- is_token_char(ch) -> bool

Design goals:
- the source is read in fixed-size chunks, never loaded whole
- tokens are produced on demand; the consumer drives all reads
- the returned iterator is single-pass (the source is consumed once)
"""

from __future__ import annotations
import io
import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Protocol

from ..errors import InvalidArgumentError, OutOfRangeError

log = logging.getLogger("text_analysis.tokenizers")

DEFAULT_BUFFER_SIZE = 1024


class CharacterSource(Protocol):
    """Anything with a file-like `read(n)` returning text ('' at end of input)."""

    def read(self, size: int = -1) -> str:
        ...


class CharacterTokenizer(ABC):
    """Base tokenizer that splits text at non-token characters."""
    name: str = "character"

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise OutOfRangeError(f"buffer_size must be greater than 0 (got {buffer_size})")
        self.buffer_size = int(buffer_size)

    @abstractmethod
    def is_token_char(self, ch: str) -> bool:
        """Return True if `ch` is part of a token."""
        raise NotImplementedError

    def tokenize(self, reader: Optional[CharacterSource]) -> Iterator[str]:
        if reader is None:
            raise InvalidArgumentError("reader must not be None")
        log.debug("tokenize: %s buffer_size=%d", self.name, self.buffer_size)
        return self._iter_tokens(reader)

    def _iter_tokens(self, reader: CharacterSource) -> Iterator[str]:
        pending: List[str] = []
        while True:
            chunk = reader.read(self.buffer_size)
            if not chunk:
                break
            for ch in chunk:
                if self.is_token_char(ch):
                    pending.append(ch)
                elif pending:
                    yield "".join(pending)
                    pending.clear()
        if pending:
            yield "".join(pending)


def tokenize_text(tokenizer: CharacterTokenizer, text: Optional[str]) -> Iterator[str]:
    """Tokenize an in-memory string with `tokenizer`."""
    if tokenizer is None:
        raise InvalidArgumentError("tokenizer must not be None")
    if text is None:
        raise InvalidArgumentError("text must not be None")
    return tokenizer.tokenize(io.StringIO(text))
