# =============================================================================
# Widgets
# =============================================================================

from hamspam.ui.widgets.result_detail import ResultDetail
from hamspam.ui.widgets.variant_table import VariantTable

__all__ = ["ResultDetail", "VariantTable"]
