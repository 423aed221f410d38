"""CLI entrypoint.

Commands:
- `text-analysis count --input <file> [<file> ...] [--stopwords <file>] [--minlen N]`
- `text-analysis count --config configs/count.yaml --input <file>`

Options given on the command line override the config file. The default
pipeline lowercases tokens, then drops stop words and short tokens when
those options are given, and prints the 10 most frequent words.
"""

from __future__ import annotations
import argparse
import logging
import os
import time
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .config import load_stopwords, load_yaml
from .counting import WordCount
from .errors import ConfigError, TextAnalysisError
from .logging_ import setup_logging
from .pipeline import PipelineSpec, count_files

log = logging.getLogger("text_analysis.cli")


def _parse_sizes(raw: str) -> List[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise ConfigError(f"N-gram sizes must be a comma-separated list of integers (got '{raw}')") from e


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="text-analysis")
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("count", help="Count the number of unique words in the given text files")
    pc.add_argument("--input", "-i", nargs="+", required=True, help="The input text file(s) to be processed.")
    pc.add_argument("--stopwords", "-s", default=None, help="The text file containing the stop words.")
    pc.add_argument("--ignore-case", action="store_true", help="Match stop words case-insensitively.")
    pc.add_argument("--minlen", "-m", type=int, default=None,
                    help="The minimum length for a token to be included in the count.")
    pc.add_argument("--ngrams", "-n", default=None, metavar="SIZES",
                    help="Count n-grams of these sizes instead of single words, e.g. 1,2.")
    pc.add_argument("--top", "-t", type=int, default=None, help="Number of entries to print (default: 10).")
    pc.add_argument("--config", "-c", default=None, help="YAML pipeline configuration.")
    pc.add_argument("--format", choices=["table", "plain"], default="table", help="Output format.")
    pc.add_argument("--verbose", "-v", action="store_true", help="Prints all messages to standard output.")
    pc.add_argument("--log-dir", default=None, help="Also write the log to <log-dir>/<run-id>.log.")
    pc.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")
    return p


def _validate(args: argparse.Namespace) -> List[str]:
    errors: List[str] = []
    for path in args.input:
        if not os.path.isfile(path):
            errors.append(f"Input file '{path}' does not exist")
    if args.stopwords and not os.path.isfile(args.stopwords):
        errors.append(f"Stop word file '{args.stopwords}' does not exist")
    if args.config and not os.path.isfile(args.config):
        errors.append(f"Config file '{args.config}' does not exist")
    if args.minlen is not None and args.minlen < 1:
        errors.append("MinLength must be 1 or more.")
    if args.top is not None and args.top < 1:
        errors.append("Top must be 1 or more.")
    return errors


def _resolve_spec(args: argparse.Namespace) -> PipelineSpec:
    spec = PipelineSpec.from_config(load_yaml(args.config)) if args.config else PipelineSpec()
    if args.stopwords:
        spec.stopwords = load_stopwords(args.stopwords)
    if args.ignore_case:
        spec.ignore_case = True
    if args.minlen is not None:
        spec.min_length = args.minlen
    if args.ngrams is not None:
        spec.ngrams = _parse_sizes(args.ngrams)
        if not spec.ngrams or min(spec.ngrams) < 1:
            raise ConfigError("N-gram sizes must be 1 or more.")
    if args.top is not None:
        spec.top = args.top
    if spec.filters is not None:
        # an explicit filter list still honours the filter options given on the command line
        if args.stopwords and "stopwords" not in spec.filters:
            spec.filters.append("stopwords")
        if args.minlen is not None and "min_length" not in spec.filters:
            spec.filters.append("min_length")
    return spec


def _echo(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _render(console: Console, results: Sequence[WordCount], fmt: str) -> None:
    if fmt == "plain":
        for wc in results:
            _echo(console, f"{wc.word} - {wc.count}")
        return
    table = Table(title="[bold]Top Words[/bold]", box=box.ROUNDED, border_style="green")
    table.add_column("#", justify="right")
    table.add_column("Word")
    table.add_column("Count", justify="right")
    for i, wc in enumerate(results, 1):
        table.add_row(str(i), str(wc.word), f"{wc.count:,}")
    console.print(table)


def _run_count(args: argparse.Namespace, console: Console) -> int:
    errors = _validate(args)
    spec: Optional[PipelineSpec] = None
    if not errors:
        try:
            spec = _resolve_spec(args)
        except ConfigError as e:
            errors.append(str(e))
    if errors:
        _echo(console, "ERROR:")
        for err in errors:
            _echo(console, f"\t{err}")
        return 1

    start = time.perf_counter()
    log.info(f"Counting {len(args.input)} file(s) top={spec.top}")
    results = count_files(spec, args.input, progress=not args.no_progress)
    _render(console, results, args.format)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    _echo(console, f"Command completed in {elapsed_ms} ms.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_dir=args.log_dir, run_id=f"{args.cmd}_{int(time.time())}")
    console = Console()
    try:
        return _run_count(args, console)
    except (TextAnalysisError, OSError, UnicodeError) as e:
        log.debug("count failed", exc_info=True)
        _echo(console, f"Program terminated with unexpected exception '{e}'")
        return 1
