# =============================================================================
# Preprocessing Module
# =============================================================================
# Pluggable text transforms applied to a copy of the experiment before
# training. Each analysis variant is a named, ordered list of transforms.
# =============================================================================

from hamspam.preprocessing.transforms import (
    COMMON_ENGLISH_WORDS,
    RemoveCommonWords,
    RemovePunctuation,
    Stem,
    Transform,
    rewrite_texts,
)

__all__ = [
    "COMMON_ENGLISH_WORDS",
    "RemoveCommonWords",
    "RemovePunctuation",
    "Stem",
    "Transform",
    "rewrite_texts",
]
