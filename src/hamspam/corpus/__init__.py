# =============================================================================
# Corpus Module
# =============================================================================
# Loading labeled corpora and splitting them into training and test data.
# =============================================================================

from hamspam.core import UnknownClassLabelError
from hamspam.corpus.parser import (
    CorpusError,
    MalformedRecordError,
    load_corpus,
    parse_lines,
    split,
)

__all__ = [
    "CorpusError",
    "MalformedRecordError",
    "UnknownClassLabelError",
    "load_corpus",
    "parse_lines",
    "split",
]
