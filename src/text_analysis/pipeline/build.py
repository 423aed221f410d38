"""Pipeline assembly and the file-counting runner.

A TextPipeline wires the stages together:

    character source -> tokenizer -> filter chain -> [n-gram filter]

`run()` returns the lazy output stream; nothing is read until the caller
iterates. `count_files()` is the I/O glue used by the CLI: it runs a fresh
pipeline over each input file and merges the counts.
"""

from __future__ import annotations
import io
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Optional, Sequence

from tqdm import tqdm

from ..counting import WordCount, WordCounter
from ..errors import InvalidArgumentError
from ..filters import Filter, NGramFilter, chain_filters, make_filters
from ..tokenizers import CharacterSource, CharacterTokenizer, get_tokenizer
from .context import PipelineSpec

log = logging.getLogger("text_analysis.build")


@dataclass
class TextPipeline:
    tokenizer: CharacterTokenizer
    filter: Optional[Filter] = None
    ngram_filter: Optional[NGramFilter] = None

    def run(self, reader: Optional[CharacterSource]) -> Iterator[Hashable]:
        stream: Iterator[Any] = self.tokenizer.tokenize(reader)
        if self.filter is not None:
            stream = self.filter.apply(stream)
        if self.ngram_filter is not None:
            stream = self.ngram_filter.apply(stream)
        return stream

    def run_text(self, text: Optional[str]) -> Iterator[Hashable]:
        if text is None:
            raise InvalidArgumentError("text must not be None")
        return self.run(io.StringIO(text))

    def describe(self) -> str:
        parts = [self.tokenizer.name]
        if self.filter is not None:
            parts.append(self.filter.name)
        if self.ngram_filter is not None:
            parts.append(f"ngrams{self.ngram_filter.sizes}")
        return " > ".join(parts)


def make_pipeline(spec: PipelineSpec) -> TextPipeline:
    tokenizer = get_tokenizer(spec.tokenizer, buffer_size=spec.buffer_size)
    filters = make_filters(
        spec.filter_names(),
        stopwords=spec.stopwords,
        ignore_case=spec.ignore_case,
        min_length=spec.min_length,
    )
    ngram_filter = NGramFilter(spec.ngrams) if spec.ngrams else None
    pipeline = TextPipeline(tokenizer=tokenizer, filter=chain_filters(filters), ngram_filter=ngram_filter)
    log.debug(f"Pipeline: {pipeline.describe()}")
    return pipeline


def count_files(spec: PipelineSpec, paths: Sequence[str], *, progress: bool = True) -> List[WordCount]:
    """Count pipeline output over every file in `paths`; return the top `spec.top` entries."""
    counter: WordCounter = WordCounter()
    totals: Dict[Hashable, int] = Counter()
    for path in tqdm(paths, desc="Counting", unit="file", disable=not progress):
        # fresh pipeline per file: windows never span two inputs
        pipeline = make_pipeline(spec)
        with open(path, "r", encoding="utf-8") as f:
            counts = counter.count(pipeline.run(f))
        totals.update(counts)
        log.info(f"{path}: items={sum(counts.values()):,} distinct={len(counts):,}")
    log.info(f"Total: files={len(paths)} distinct={len(totals):,}")
    return counter.top(totals, spec.top)
