"""text_analysis

Composable, lazy text-analysis pipeline.

Public API surface:
- text_analysis.tokenizers : character stream -> tokens
- text_analysis.filters : token filters, filter chaining, n-gram expansion
- text_analysis.window.SlidingWindow : fixed-capacity circular buffer
- text_analysis.ngram.NGram : n-gram value type
- text_analysis.counting.WordCounter : frequency counts and top-K
- text_analysis.pipeline : config-driven pipeline assembly
- text_analysis.cli.main : CLI entrypoint

Every stage pulls from its predecessor on demand, so a pipeline over a large
file holds only the tokenizer's read buffer and the n-gram window in memory.
"""

from .counting import WordCount, WordCounter
from .filters import FilterChain, LowercaseFilter, MinLengthFilter, NGramFilter, StopWordFilter
from .ngram import NGram
from .tokenizers import BasicTokenizer, tokenize_text
from .window import SlidingWindow

__all__ = [
    "__version__",
    "BasicTokenizer",
    "tokenize_text",
    "FilterChain",
    "LowercaseFilter",
    "MinLengthFilter",
    "StopWordFilter",
    "NGramFilter",
    "NGram",
    "SlidingWindow",
    "WordCount",
    "WordCounter",
]
__version__ = "0.1.0"
