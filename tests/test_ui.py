# =============================================================================
# Results Viewer Tests
# =============================================================================
# Drives the Textual app headlessly through its pilot.
# =============================================================================

import pytest

from hamspam.analysis import AnalysisResult, run
from hamspam.app import ResultsApp
from hamspam.bayes import EvaluationResult
from hamspam.core import Experiment, MessageClass
from hamspam.ui import ResultDetail, VariantTable


@pytest.mark.asyncio
async def test_table_lists_every_variant(sample_experiment):
    results = run(sample_experiment)
    app = ResultsApp(results)

    async with app.run_test() as pilot:
        await pilot.pause()
        table = app.query_one("#variants", VariantTable)

        assert table.row_count == 5
        assert table.get_selected_result() is results[0]


@pytest.mark.asyncio
async def test_cursor_movement_updates_detail(sample_experiment):
    results = run(sample_experiment)
    app = ResultsApp(results)

    async with app.run_test() as pilot:
        await pilot.press("down")
        await pilot.pause()

        table = app.query_one("#variants", VariantTable)
        detail = app.query_one("#detail", ResultDetail)

        assert table.get_selected_result() is results[1]
        assert "Analysis: No Punctuation Analysis" in detail.report_text
        assert "Overall Accuracy:" in detail.report_text


@pytest.mark.asyncio
async def test_detail_shows_single_message_verdict():
    experiment = Experiment(
        ham=["hello there friend"],
        spam=["free money now", "free gift now"],
        probe="free",
    )
    results = run(experiment)
    app = ResultsApp(results, probe="free", top_words=2)

    async with app.run_test() as pilot:
        await pilot.press("down", "down")
        await pilot.pause()

        detail = app.query_one("#detail", ResultDetail)
        assert "Analysis: Stemmer Analysis" in detail.report_text
        assert "Text Message: free" in detail.report_text
        assert "Classifies as: spam" in detail.report_text


def test_result_cell(tiny_training_set):
    batch = AnalysisResult("Batch", tiny_training_set, evaluation=EvaluationResult(total=4, correct_ham=3))
    spam = AnalysisResult("Spam", tiny_training_set, prediction=MessageClass.SPAM)
    ham = AnalysisResult("Ham", tiny_training_set, prediction=MessageClass.HAM)

    assert VariantTable._result_cell(batch) == "75.00%"
    assert VariantTable._result_cell(spam) == "[red]spam[/]"
    assert VariantTable._result_cell(ham) == "[green]ham[/]"
