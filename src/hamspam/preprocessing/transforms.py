# =============================================================================
# Preprocessing Transforms
# =============================================================================
# Transforms rewrite every text in an experiment in place:
#   - Ham and spam training texts
#   - Test case texts (labels are kept)
#   - The probe message, if any
#
# A transform is any object with an `apply(experiment)` method. The classifier
# never knows which transforms ran; it just sees different tokens.
# =============================================================================

import string
from dataclasses import dataclass, field, replace
from typing import Callable, Protocol

from nltk.stem import PorterStemmer

from hamspam.core import Experiment


# The 100 most common English words, most frequent first
COMMON_ENGLISH_WORDS = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
    "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
    "when", "make", "can", "like", "time", "no", "just", "him", "know", "take",
    "people", "into", "year", "your", "good", "some", "could", "them", "see", "other",
    "than", "then", "now", "look", "only", "come", "its", "over", "think", "also",
    "back", "after", "use", "two", "how", "our", "work", "first", "well", "way",
    "even", "new", "want", "because", "any", "these", "give", "day", "most", "us",
)


class Transform(Protocol):
    """Anything that can rewrite an experiment's texts in place."""

    def apply(self, experiment: Experiment) -> None:
        ...


def rewrite_texts(experiment: Experiment, rewrite: Callable[[str], str]) -> None:
    """
    Apply a text rewrite to every message in an experiment, in place.

    Args:
        experiment: Experiment to modify.
        rewrite: Function mapping one message text to its new text.
    """
    experiment.ham[:] = [rewrite(text) for text in experiment.ham]
    experiment.spam[:] = [rewrite(text) for text in experiment.spam]
    experiment.test_cases[:] = [
        replace(case, text=rewrite(case.text)) for case in experiment.test_cases
    ]
    if experiment.probe is not None:
        experiment.probe = rewrite(experiment.probe)


class RemovePunctuation:
    """Delete ASCII punctuation characters from every message."""

    _TABLE = str.maketrans("", "", string.punctuation)

    def apply(self, experiment: Experiment) -> None:
        rewrite_texts(experiment, self.strip)

    def strip(self, text: str) -> str:
        return text.translate(self._TABLE)

    def __repr__(self) -> str:
        return "RemovePunctuation()"


class Stem:
    """
    Reduce every token to its Porter stem.

    Example:
        >>> Stem().stem_text("winning prizes now")
        'win prize now'
    """

    def __init__(self) -> None:
        self._stemmer = PorterStemmer()

    def apply(self, experiment: Experiment) -> None:
        rewrite_texts(experiment, self.stem_text)

    def stem_text(self, text: str) -> str:
        return " ".join(self._stemmer.stem(token) for token in text.split())

    def __repr__(self) -> str:
        return "Stem()"


@dataclass
class RemoveCommonWords:
    """
    Drop the most common English words from every message.

    Matching is case-insensitive; surviving tokens keep their case.

    Attributes:
        count: How many of the most common words to remove (at most 100).
    """
    count: int = 100
    _words: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.count <= len(COMMON_ENGLISH_WORDS):
            raise ValueError(
                f"count must be between 0 and {len(COMMON_ENGLISH_WORDS)}, got {self.count}"
            )
        self._words = frozenset(COMMON_ENGLISH_WORDS[:self.count])

    def apply(self, experiment: Experiment) -> None:
        rewrite_texts(experiment, self.remove)

    def remove(self, text: str) -> str:
        return " ".join(token for token in text.split() if token.lower() not in self._words)
