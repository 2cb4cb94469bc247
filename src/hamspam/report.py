# =============================================================================
# Console Report
# =============================================================================
# Formats analysis results for the terminal.
#
# For every variant the report shows:
#   - Vocabulary size and the spam share of the training messages
#   - Batch mode: the four confusion buckets and accuracy percentages
#   - Single-message mode: each class's most frequent words and the verdict
#
# Undefined metrics (zero denominators) print as "undefined".
#
# The report is built as (text, style) lines. render() drops the styles and
# returns plain text; print_report() writes the same lines through rich with
# headings highlighted.
# =============================================================================

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from hamspam.analysis import AnalysisResult
from hamspam.bayes import EvaluationResult, FrequencyTable

# Styles for report headings
HEADING_STYLE = "underline cyan"
SECTION_STYLE = "bold green"
VERDICT_STYLE = "bold red"

# (text, rich style or None)
Line = tuple[str, str | None]


def most_common_words(frequency: FrequencyTable, n: int) -> list[tuple[str, int]]:
    """
    The n most frequent words of a class, most frequent first.

    Words with equal counts keep their first-seen order.
    """
    if n <= 0:
        return []
    return frequency.most_common(n)


def format_percent(value: float | None) -> str:
    """Format a ratio as a percentage, or "undefined" for None."""
    if value is None:
        return "undefined"
    return f"{value * 100:.2f}%"


def _training_summary(result: AnalysisResult) -> list[Line]:
    training_set = result.training_set
    return [
        (f"Analysis: {result.name}", HEADING_STYLE),
        (f"Vocabulary has {len(training_set.vocabulary)} words", None),
        ("", None),
        ("Training Set:", None),
        (
            f"\t{training_set.spam.message_count} of {training_set.total_messages} "
            f"messages were spam ({format_percent(training_set.spam.prior)})",
            None,
        ),
        ("", None),
    ]


def _evaluation_lines(evaluation: EvaluationResult) -> list[Line]:
    return [
        ("Test Set:", None),
        (f"\tCorrect Ham: {evaluation.correct_ham}", None),
        (f"\tCorrect Spam: {evaluation.correct_spam}", None),
        (f"\tIncorrect Ham (actually was spam): {evaluation.incorrect_ham}", None),
        (f"\tIncorrect Spam (actually was ham): {evaluation.incorrect_spam}", None),
        (f"\tPercentage Correct Ham: {format_percent(evaluation.accuracy_ham)}", None),
        (f"\tPercentage Correct Spam: {format_percent(evaluation.accuracy_spam)}", None),
        (f"\tOverall Accuracy: {format_percent(evaluation.overall_accuracy)}", SECTION_STYLE),
    ]


def _prediction_lines(result: AnalysisResult, probe: str | None, top_words: int) -> list[Line]:
    lines: list[Line] = []
    for label, model in (("HAM", result.training_set.ham), ("SPAM", result.training_set.spam)):
        lines.append((f"The {top_words} most common {label} words", SECTION_STYLE))
        for word, count in most_common_words(model.frequency, top_words):
            lines.append((f"\t{word}\t{count}", None))
        lines.append(("", None))

    if probe is not None:
        lines.append((f"Text Message: {probe}", VERDICT_STYLE))
    lines.append((f"Classifies as: {result.prediction}", VERDICT_STYLE))
    return lines


def report_lines(
    results: Sequence[AnalysisResult],
    *,
    probe: str | None = None,
    top_words: int = 5,
) -> list[Line]:
    """
    Build the report as styled lines.

    Args:
        results: Results in variant order.
        probe: The probe message as the user typed it, shown in
               single-message mode.
        top_words: How many frequent words per class to list.
    """
    lines: list[Line] = []
    for result in results:
        lines.extend(_training_summary(result))
        if result.evaluation is not None:
            lines.extend(_evaluation_lines(result.evaluation))
        else:
            lines.extend(_prediction_lines(result, probe, top_words))
        lines.append(("", None))
    return lines


def render(results: Sequence[AnalysisResult], *, probe: str | None = None, top_words: int = 5) -> str:
    """Render analysis results as a plain-text report."""
    return "\n".join(text for text, _ in report_lines(results, probe=probe, top_words=top_words))


def print_report(
    results: Sequence[AnalysisResult],
    *,
    probe: str | None = None,
    top_words: int = 5,
    console: Console | None = None,
) -> None:
    """
    Print the report with highlighted headings.

    Args:
        console: Console to write to. Uses a stdout console if None.
    """
    console = console or Console()
    for text, style in report_lines(results, probe=probe, top_words=top_words):
        console.print(Text(text, style=style or ""), soft_wrap=True)
