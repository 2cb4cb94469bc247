# =============================================================================
# hamspam: Naive Bayes SMS Spam Classification
# =============================================================================
#
#   "Ham or spam? Let the word counts decide."
#
# hamspam trains a bag-of-words Naive Bayes model on a labeled corpus of short
# text messages and reports how well it separates ham from spam.
#
# Features:
#   - Tab-delimited corpus loading with reproducible train/test splits
#   - Laplace-smoothed, log-space Naive Bayes scoring
#   - Batch evaluation (confusion buckets + accuracy) or single-message verdicts
#   - Side-by-side preprocessing variants (punctuation, stemming, common words)
#   - Plain console report or a Textual results viewer
#   - XDG Base Directory compliant TOML configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "hamspam"

# Main entry point - this is what gets called by the 'hamspam' command
from hamspam.app import main

__all__ = ["main", "__version__", "__app_name__"]
