# =============================================================================
# UI Module
# =============================================================================
# Textual-based results viewer for hamspam.
#
# Structure:
#   - widgets/: The variant table and the detail pane
#
# The viewer is optional; the plain console report (hamspam.report) covers
# the same information without a terminal UI.
# =============================================================================

from hamspam.ui.widgets import ResultDetail, VariantTable

__all__ = ["ResultDetail", "VariantTable"]
