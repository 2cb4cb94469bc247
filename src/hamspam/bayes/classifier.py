# =============================================================================
# Naive Bayes Classifier
# =============================================================================
# Scores a message against both classes of a trained model and picks one.
#
#   log P(message|class) = sum of log10 P(token|class) over known tokens
#
# Summing logs keeps long messages from underflowing to zero. The two sums are
# compared as-is: raising 10 to each sum first would underflow both to 0.0 on
# long messages and turn clear decisions into ties.
#
# Decision rule: ham wins only if it scores strictly higher. Ties go to spam,
# including messages with no known tokens at all (both scores are 0).
# =============================================================================

import math
from dataclasses import dataclass

from hamspam.bayes.model import TrainingSet
from hamspam.bayes.tokenizer import tokenize
from hamspam.core import MessageClass


@dataclass(frozen=True)
class Scores:
    """
    Log10 likelihood of a message under each class.

    Attributes:
        ham: Summed log10 likelihoods under the ham class.
        spam: Summed log10 likelihoods under the spam class.
        known_tokens: How many tokens were found in the vocabulary.
    """
    ham: float = 0.0
    spam: float = 0.0
    known_tokens: int = 0

    @property
    def winner(self) -> MessageClass:
        """The predicted class (ties go to spam)."""
        return MessageClass.HAM if self.ham > self.spam else MessageClass.SPAM


def score(training_set: TrainingSet, text: str) -> Scores:
    """
    Score a raw message against both classes.

    Tokens outside the vocabulary are skipped; they carry no information.

    Args:
        training_set: The trained model.
        text: Raw message text.

    Returns:
        Per-class log10 scores.
    """
    ham_probability = training_set.ham.probability
    spam_probability = training_set.spam.probability

    ham_score = 0.0
    spam_score = 0.0
    known = 0
    for token in tokenize(text):
        if token not in training_set.vocabulary:
            continue
        ham_score += math.log10(ham_probability[token])
        spam_score += math.log10(spam_probability[token])
        known += 1

    return Scores(ham=ham_score, spam=spam_score, known_tokens=known)


def classify(training_set: TrainingSet, text: str) -> MessageClass:
    """
    Predict the class of a raw message.

    Example:
        >>> from hamspam.bayes import train
        >>> model = train(["hello there friend"], ["free money now", "free gift now"])
        >>> classify(model, "free")
        <MessageClass.SPAM: 'spam'>
    """
    return score(training_set, text).winner
