# =============================================================================
# Report Tests
# =============================================================================

import io
from collections import Counter

from rich.console import Console

from hamspam.analysis import AnalysisResult
from hamspam.bayes import EvaluationResult
from hamspam.core import MessageClass
from hamspam.report import (
    HEADING_STYLE,
    VERDICT_STYLE,
    format_percent,
    most_common_words,
    print_report,
    render,
    report_lines,
)


def test_most_common_words():
    frequency = Counter({"free": 4, "now": 2, "call": 2, "win": 1})
    assert most_common_words(frequency, 2) == [("free", 4), ("now", 2)]
    assert most_common_words(frequency, 0) == []


def test_format_percent():
    assert format_percent(0.875) == "87.50%"
    assert format_percent(None) == "undefined"


def test_batch_report(tiny_training_set):
    result = AnalysisResult(
        "Default Analysis (no preprocessing)",
        tiny_training_set,
        evaluation=EvaluationResult(
            total=2, correct_ham=1, correct_spam=1, accuracy_ham=1.0, accuracy_spam=None,
        ),
    )

    text = render([result])

    assert "Analysis: Default Analysis (no preprocessing)" in text
    assert "Vocabulary has 7 words" in text
    assert "2 of 3 messages were spam (66.67%)" in text
    assert "Correct Ham: 1" in text
    assert "Percentage Correct Ham: 100.00%" in text
    assert "Percentage Correct Spam: undefined" in text
    assert "Overall Accuracy: 100.00%" in text


def test_single_message_report(tiny_training_set):
    result = AnalysisResult("Stemmer Analysis", tiny_training_set, prediction=MessageClass.SPAM)

    text = render([result], probe="free", top_words=2)

    assert "The 2 most common SPAM words" in text
    assert "\tfree\t2" in text
    assert "Text Message: free" in text
    assert "Classifies as: spam" in text


def test_print_report_styles_headings(tiny_training_set):
    result = AnalysisResult("Stemmer Analysis", tiny_training_set, prediction=MessageClass.SPAM)
    console = Console(
        record=True, width=100, file=io.StringIO(), force_terminal=True, color_system="standard"
    )

    print_report([result], probe="free", console=console)

    text = console.export_text(clear=False)
    assert "Analysis: Stemmer Analysis" in text
    assert "Classifies as: spam" in text

    # Headings carry ANSI styling on a color terminal
    assert "\x1b[" in console.export_text(styles=True)


def test_report_lines_mark_headings(tiny_training_set):
    result = AnalysisResult("Stemmer Analysis", tiny_training_set, prediction=MessageClass.SPAM)

    lines = report_lines([result], probe="free")

    assert lines[0] == ("Analysis: Stemmer Analysis", HEADING_STYLE)
    assert ("Classifies as: spam", VERDICT_STYLE) in lines
    assert ("Vocabulary has 7 words", None) in lines
