"""
cli.py - command line entry point for the quote generator
Features:
- Trains a Markov model on a corpus file, then prints one or more quotes
- Settings come from defaults, an optional JSON config and command line flags (in that order)
- Optional training statistics table and a full dump of the model for debugging
- Uses Rich for tables and formatting
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.markup import escape
from rich import box

from markov_quotes.core.generator import QuoteGenerator
from markov_quotes.core.markov_model import MarkovModel
from markov_quotes.core.trainer import CorpusUnavailableError, Trainer, TrainingStats
from markov_quotes.utils.config_manager import Config, ConfigError
from markov_quotes.utils.logger_utils import Log, configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="markov-quotes", description="Generate quotes from a Markov chain trained on a corpus.")
    p.add_argument("--corpus", "-c", dest="corpus_path", help="training text, one quote per line")
    p.add_argument("--config", help="JSON config file")
    p.add_argument("-n", "--count", dest="quote_count", type=int, help="number of quotes to print")
    p.add_argument("--seed", type=int, help="random seed for reproducible output")
    p.add_argument("--context-size", type=int, help="words of history per prediction")
    p.add_argument("--buckets", dest="bucket_count", type=int, help="hash table bucket count")
    p.add_argument("--max-length", dest="max_quote_length", type=int, help="maximum words per quote")
    p.add_argument("--stats", action="store_true", help="show training statistics")
    p.add_argument("--dump", action="store_true", help="print every context and its transitions")
    p.add_argument("--show-config", action="store_true", help="print the effective configuration")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--log-file", help="also write logs to this file")
    return p


class CLI:
    """Runs one train-then-generate pass from parsed arguments."""

    def __init__(self, args: argparse.Namespace, console: Optional[Console] = None):
        self.args = args
        self.console = console or Console()
        self.cfg = Config(args.config)
        self.cfg.update({
            "corpus_path": args.corpus_path,
            "quote_count": args.quote_count,
            "seed": args.seed,
            "context_size": args.context_size,
            "bucket_count": args.bucket_count,
            "max_quote_length": args.max_quote_length,
        })
        self.model = MarkovModel(
            bucket_count=self.cfg.get("bucket_count"),
            context_size=self.cfg.get("context_size"),
            rng=random.Random(self.cfg.get("seed")),
        )

    def run(self) -> int:
        if self.args.show_config:
            self.cfg.show(self.console)

        trainer = Trainer(self.model, skip_marker=self.cfg.get("skip_marker"))
        stats = trainer.train_file(self.cfg.get("corpus_path"))

        if self.args.dump:
            self._dump_model()
        if self.args.stats:
            self._show_stats(stats)

        generator = QuoteGenerator(
            self.model,
            max_length=self.cfg.get("max_quote_length"),
            terminators=self.cfg.get("terminators"),
        )
        with Log.time_block("generation"):
            quotes = generator.generate_many(self.cfg.get("quote_count"))
        self._display_quotes(quotes)
        return 0

    # DISPLAY -------------------------------------------------------------------------------
    def _display_quotes(self, quotes: List[str]):
        for q in quotes:
            if q:
                self.console.print(q, markup=False, highlight=False, soft_wrap=True)
            else:
                self.console.print("[dim](no quote: the model has nothing for an empty context)[/dim]")

    def _show_stats(self, stats: TrainingStats):
        ms = self.model.stats()
        t = Table(title="Training Summary", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", justify="right")
        t.add_row("Lines read", str(stats.lines))
        t.add_row("Blank lines", str(stats.blank_lines))
        t.add_row("Skipped lines", str(stats.skipped_lines))
        t.add_row("Tokens", str(stats.tokens))
        t.add_row("Contexts", str(ms["entries"]))
        t.add_row("Transitions", str(ms["transitions"]))
        t.add_row("Buckets used", f"{ms['used_buckets']}/{ms['buckets']}")
        t.add_row("Longest bucket", str(ms["longest_bucket"]))
        self.console.print(t)

    def _dump_model(self):
        text = self.model.dump() or "(empty model)"
        self.console.print(Panel(Text(text), title="Model", border_style="cyan"))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        configure_logging(verbose=args.verbose, log_path=args.log_file)
    except OSError as e:
        console.print(f"[red]Error:[/red] unable to open log file: {escape(str(e))}", highlight=False)
        return 1
    try:
        return CLI(args, console=console).run()
    except (CorpusUnavailableError, ConfigError) as e:
        logger.debug("aborting: %s", e)
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
