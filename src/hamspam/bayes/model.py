# =============================================================================
# Naive Bayes Training
# =============================================================================
# Builds a two-class model from raw training messages.
#
# How it works:
#   1. Collect the vocabulary across both classes
#   2. Count how often each token occurs in each class
#   3. Turn each class's counts into Laplace-smoothed likelihoods:
#
#        P(token|class) = (count(token) + 1) / (D + V)
#
#      where D is the number of *distinct* tokens seen in the class and V is
#      the vocabulary size. The +1 means no vocabulary token ever has zero
#      probability, even if the class never saw it.
#   4. Record each class's prior: its share of the training messages
#
# Note that D counts distinct tokens, not total occurrences as in the
# textbook formulation. Reported accuracies depend on this, so don't
# "fix" it without rechecking them.
# =============================================================================

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from hamspam.bayes.tokenizer import Vocabulary, tokenize
from hamspam.core import Experiment

logger = logging.getLogger(__name__)

# Token -> occurrence count within one class. Missing tokens count as zero.
FrequencyTable = Counter

# Token -> smoothed likelihood for one class, read-only.
ProbabilityTable = Mapping[str, float]


class DegenerateStatisticError(Exception):
    """Raised when a statistic would divide by zero (e.g. an empty class)."""
    pass


def count_words(messages: Iterable[str]) -> FrequencyTable:
    """
    Count token occurrences across a class's training messages.

    Every occurrence counts, so a token repeated within one message is
    counted more than once.

    Example:
        >>> count_words(["free money", "free gift"])
        Counter({'free': 2, 'money': 1, 'gift': 1})
    """
    frequency: FrequencyTable = FrequencyTable()
    for message in messages:
        frequency.update(tokenize(message))
    return frequency


def estimate(frequency: Mapping[str, int], vocabulary: Vocabulary) -> ProbabilityTable:
    """
    Convert a class's frequency table into smoothed likelihoods.

    Args:
        frequency: Token counts for the class.
        vocabulary: The shared vocabulary of both classes.

    Returns:
        Read-only mapping covering exactly the vocabulary tokens.
    """
    denominator = len(frequency) + len(vocabulary)
    probabilities = {
        token: (frequency.get(token, 0) + 1) / denominator
        for token in vocabulary
    }
    return MappingProxyType(probabilities)


@dataclass(frozen=True)
class ClassModel:
    """
    Everything the model knows about one class.

    Attributes:
        message_count: Number of training messages in the class.
        prior: The class's share of all training messages.
        frequency: Token occurrence counts.
        probability: Smoothed likelihood of each vocabulary token.
    """
    message_count: int
    prior: float
    frequency: FrequencyTable
    probability: ProbabilityTable


@dataclass(frozen=True)
class TrainingSet:
    """
    A trained two-class model.

    Attributes:
        total_messages: Training messages across both classes.
        ham: Model of the ham class.
        spam: Model of the spam class.
        vocabulary: Tokens the model can score.
    """
    total_messages: int
    ham: ClassModel
    spam: ClassModel
    vocabulary: Vocabulary


def _class_model(messages: list[str], total: int, vocabulary: Vocabulary) -> ClassModel:
    frequency = count_words(messages)
    return ClassModel(
        message_count=len(messages),
        prior=len(messages) / total,
        frequency=frequency,
        probability=estimate(frequency, vocabulary),
    )


def train(ham: list[str], spam: list[str]) -> TrainingSet:
    """
    Train a model from each class's raw training messages.

    Args:
        ham: Ham training messages.
        spam: Spam training messages.

    Returns:
        The trained TrainingSet.

    Raises:
        DegenerateStatisticError: If either class has no training messages,
            since its prior would be zero.
    """
    if not ham or not spam:
        raise DegenerateStatisticError(
            f"Cannot train with an empty class "
            f"({len(ham)} ham, {len(spam)} spam messages)"
        )

    total = len(ham) + len(spam)
    vocabulary = Vocabulary.from_messages(ham, spam)
    logger.debug(f"Training on {total} messages, vocabulary of {len(vocabulary)} tokens")

    return TrainingSet(
        total_messages=total,
        ham=_class_model(ham, total, vocabulary),
        spam=_class_model(spam, total, vocabulary),
        vocabulary=vocabulary,
    )


def train_experiment(experiment: Experiment) -> TrainingSet:
    """Train on an experiment's training texts."""
    return train(experiment.ham, experiment.spam)
