"""Example: Adding a new tokenizer and filter without modifying the registries' modules.

This demonstrates how to plug a custom character classifier and a custom
filter into a pipeline at runtime, then count bigrams.
"""

import io
from typing import Iterable, Iterator

from text_analysis.counting import WordCounter
from text_analysis.filters import Filter, NGramFilter
from text_analysis.pipeline import PipelineSpec, make_pipeline
from text_analysis.tokenizers import CharacterTokenizer, register_tokenizer


# Example: hashtags and mentions stay inside tokens
class SocialTokenizer(CharacterTokenizer):
    """Token characters are alphanumerics plus '#', '@' and '_'."""
    name = "social"

    def is_token_char(self, ch: str) -> bool:
        return ch.isalnum() or ch in "#@_"


class HashtagFilter(Filter[str, str]):
    """Keep only hashtags."""
    name = "hashtags"

    def _filter(self, stream: Iterable[str]) -> Iterator[str]:
        for token in stream:
            if token.startswith("#"):
                yield token


# Register it
register_tokenizer("social", SocialTokenizer)

text = "Loving the #python meetup with @ana! #python #pydata, see you at #pydata next week."

pipeline = make_pipeline(PipelineSpec(tokenizer="social", ngrams=[1, 2]))
print("Top n-grams:")
for wc in WordCounter().top_count(pipeline.run(io.StringIO(text)), 5):
    print(f"  {wc.word} - {wc.count}")

# Filters compose directly as well
hashtag_bigrams = HashtagFilter().chain(NGramFilter([2]))
tokens = SocialTokenizer().tokenize(io.StringIO(text))
print("Hashtag bigrams:")
for gram in hashtag_bigrams.apply(tokens):
    print(f"  {gram}")
