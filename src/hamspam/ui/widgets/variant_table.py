# =============================================================================
# Variant Table Widget
# =============================================================================
# A table of analysis variants, one row per preprocessing variant.
#
# Columns: Variant, Vocabulary size, and either overall accuracy (batch mode)
# or the predicted class (single-message mode).
# =============================================================================

from textual.widgets import DataTable
from textual.widgets.data_table import RowKey

from hamspam.analysis import AnalysisResult
from hamspam.core import MessageClass
from hamspam.report import format_percent


class VariantTable(DataTable):
    """
    A table widget listing analysis results.

    Usage:
        >>> table = VariantTable()
        >>> table.load_results(results)
    """

    # Column configuration
    COLUMNS = [
        ("Variant", 0),     # Variant name (flexible width)
        ("Vocab", 8),       # Vocabulary size
        ("Result", 12),     # Accuracy or verdict
    ]

    def __init__(self, **kwargs) -> None:
        """
        Initialize the variant table.

        Args:
            **kwargs: Additional arguments passed to DataTable.
        """
        super().__init__(**kwargs)
        self._results: dict[RowKey, AnalysisResult] = {}

        # Configure table
        self.cursor_type = "row"
        self.zebra_stripes = True

    def on_mount(self) -> None:
        """Set up columns when widget is mounted."""
        for label, width in self.COLUMNS:
            if width > 0:
                self.add_column(label, width=width)
            else:
                self.add_column(label)  # Flexible width

    def load_results(self, results: list[AnalysisResult]) -> None:
        """
        Load analysis results into the table.

        Args:
            results: Results in variant order.
        """
        self.clear()
        self._results.clear()

        for result in results:
            row_key = self.add_row(
                result.name,
                str(len(result.training_set.vocabulary)),
                self._result_cell(result),
            )
            self._results[row_key] = result

    def get_selected_result(self) -> AnalysisResult | None:
        """Get the result under the cursor."""
        if self.row_count == 0:
            return None
        row_key, _ = self.coordinate_to_cell_key(self.cursor_coordinate)
        return self._results.get(row_key)

    @staticmethod
    def _result_cell(result: AnalysisResult) -> str:
        if result.evaluation is not None:
            return format_percent(result.evaluation.overall_accuracy)
        if result.prediction is MessageClass.SPAM:
            return "[red]spam[/]"
        return "[green]ham[/]"
