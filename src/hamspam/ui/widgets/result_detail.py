# =============================================================================
# Result Detail Widget
# =============================================================================
# Shows the full report for the highlighted variant.
# =============================================================================

from textual.containers import ScrollableContainer
from textual.widgets import Static

from hamspam.analysis import AnalysisResult
from hamspam.report import render


class ResultDetail(ScrollableContainer):
    """A scrollable pane with one variant's report."""

    DEFAULT_CSS = """
    ResultDetail {
        padding: 0 1;
    }
    """

    def __init__(self, *, probe: str | None = None, top_words: int = 5, **kwargs) -> None:
        super().__init__(**kwargs)
        self._probe = probe
        self._top_words = top_words
        self.report_text = ""  # Report currently shown

    def compose(self):
        """Compose the widget."""
        yield Static("Select a variant", id="detail-body", markup=False)

    def show_result(self, result: AnalysisResult) -> None:
        """Replace the pane's content with a variant's report."""
        report = render([result], probe=self._probe, top_words=self._top_words)
        self.report_text = report.expandtabs(4)
        self.query_one("#detail-body", Static).update(self.report_text)
