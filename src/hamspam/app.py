# =============================================================================
# hamspam Main Application
# =============================================================================
# Command-line entry point plus the optional Textual results viewer.
#
# A run:
#   1. Loads configuration (config.toml, then command-line overrides)
#   2. Loads and splits the corpus
#   3. Runs every preprocessing variant
#   4. Prints a report, or opens the results viewer with --tui
# =============================================================================

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from hamspam import __app_name__, __version__
from hamspam.analysis import AnalysisResult, default_variants, run
from hamspam.bayes import DegenerateStatisticError
from hamspam.config import Config, ConfigError, print_paths
from hamspam.core import UnknownClassLabelError
from hamspam.corpus import CorpusError, load_corpus, split
from hamspam.report import print_report
from hamspam.ui import ResultDetail, VariantTable

logger = logging.getLogger(__name__)


class ResultsApp(App):
    """
    Terminal viewer for analysis results.

    The layout is a table of variants above a detail pane showing the full
    report of the highlighted variant.
    """

    TITLE = "hamspam"
    SUB_TITLE = "Naive Bayes spam analysis"

    CSS = """
    #variants {
        height: auto;
        max-height: 50%;
    }

    #detail {
        border-top: solid $primary;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        results: list[AnalysisResult],
        *,
        probe: str | None = None,
        top_words: int = 5,
    ) -> None:
        super().__init__()
        self.results = results
        self._probe = probe
        self._top_words = top_words

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield VariantTable(id="variants")
            yield ResultDetail(
                id="detail",
                probe=self._probe,
                top_words=self._top_words,
                can_focus=False,
            )
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#variants", VariantTable)
        table.load_results(self.results)
        table.focus()

    def on_data_table_row_highlighted(self, event: VariantTable.RowHighlighted) -> None:
        """Show the report for the variant under the cursor."""
        result = self.query_one("#variants", VariantTable).get_selected_result()
        if result is not None:
            self.query_one("#detail", ResultDetail).show_result(result)

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="hamspam: Naive Bayes spam classification of short text messages",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Save the effective configuration to the config file and exit",
    )

    parser.add_argument(
        "-f", "--file",
        help="Labeled corpus file (default: from config)",
    )

    parser.add_argument(
        "-d", "--delimiter",
        help="Delimiter between class and message text (default is tab)",
    )

    parser.add_argument(
        "--ratio",
        type=float,
        help="Share of the corpus used for training (default: 0.75)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Shuffle seed for a reproducible train/test split",
    )

    parser.add_argument(
        "-p", "--probe",
        help="Classify this message instead of evaluating a test split",
    )

    parser.add_argument(
        "--common-words",
        type=int,
        help="How many common English words to remove in the last variant",
    )

    parser.add_argument(
        "--top-words",
        type=int,
        help="How many frequent words per class to report",
    )

    parser.add_argument(
        "--tui",
        action="store_true",
        help="Show results in the terminal viewer instead of printing them",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """
    Return a copy of the config with command-line flags applied.

    Raises:
        ConfigError: If an override is out of range.
    """
    corpus = dataclasses.replace(config.corpus)
    analysis = dataclasses.replace(config.analysis)

    if args.file is not None:
        corpus.path = args.file
    if args.delimiter is not None:
        corpus.delimiter = args.delimiter
    if args.ratio is not None:
        corpus.train_ratio = args.ratio
    if args.seed is not None:
        corpus.seed = args.seed
    if args.probe is not None:
        analysis.probe = args.probe
    if args.common_words is not None:
        analysis.common_words = args.common_words
    if args.top_words is not None:
        analysis.top_words = args.top_words

    updated = Config(corpus=corpus, analysis=analysis)
    updated.validate()
    return updated


def run_analysis(config: Config) -> list[AnalysisResult]:
    """
    Load the corpus and run every variant.

    Raises:
        CorpusError: If the corpus can't be read or is malformed.
        UnknownClassLabelError: If the corpus has an unknown class label.
        DegenerateStatisticError: If a class ends up with no training data.
    """
    cases = load_corpus(config.corpus_path(), config.corpus.delimiter)
    experiment = split(
        cases,
        train_ratio=config.corpus.train_ratio,
        seed=config.corpus.seed,
        probe=config.analysis.probe or None,
    )
    return run(experiment, default_variants(config.analysis.common_words))


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for hamspam.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    try:
        config = apply_overrides(Config.load(args.config), args)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    if args.write_config:
        path = config.save(args.config)
        print(f"Wrote {path}")
        return 0

    try:
        results = run_analysis(config)
    except (CorpusError, UnknownClassLabelError, DegenerateStatisticError) as e:
        print(f"Cannot analyze corpus: {e}", file=sys.stderr)
        return 1

    probe = config.analysis.probe or None
    if args.tui:
        ResultsApp(results, probe=probe, top_words=config.analysis.top_words).run()
    else:
        print_report(results, probe=probe, top_words=config.analysis.top_words)
        print("Done.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
