# =============================================================================
# Evaluation Harness
# =============================================================================
# Runs the classifier over labeled test cases (batch mode) or a single message
# and aggregates the results.
#
# Batch results are four confusion buckets:
#   - correct_ham:    predicted ham, actually ham
#   - correct_spam:   predicted spam, actually spam
#   - incorrect_ham:  predicted ham, actually spam
#   - incorrect_spam: predicted spam, actually ham
#
# Per-class accuracy pairs each "correct" bucket with the *other* class's
# "incorrect" bucket:
#
#   accuracy_ham  = correct_ham  / (correct_ham  + incorrect_spam)
#   accuracy_spam = correct_spam / (correct_spam + incorrect_ham)
#
# So accuracy_ham is really "share of actual ham we got right" (incorrect_spam is ham
# predicted as spam), and likewise for spam.
#
# A zero denominator leaves the metric undefined (None) rather than NaN.
# =============================================================================

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hamspam.bayes.classifier import classify
from hamspam.bayes.model import TrainingSet
from hamspam.core import Batch, LabeledCase, MessageClass, Mode, SingleMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Aggregated batch evaluation results.

    Attributes:
        total: Number of test cases evaluated.
        correct_ham: Ham predicted as ham.
        correct_spam: Spam predicted as spam.
        incorrect_ham: Spam wrongly predicted as ham.
        incorrect_spam: Ham wrongly predicted as spam.
        accuracy_ham: correct_ham / (correct_ham + incorrect_spam), or None.
        accuracy_spam: correct_spam / (correct_spam + incorrect_ham), or None.
    """
    total: int = 0
    correct_ham: int = 0
    correct_spam: int = 0
    incorrect_ham: int = 0
    incorrect_spam: int = 0
    accuracy_ham: float | None = None
    accuracy_spam: float | None = None

    @property
    def correct(self) -> int:
        """Number of correctly classified cases."""
        return self.correct_ham + self.correct_spam

    @property
    def overall_accuracy(self) -> float | None:
        """Share of all cases classified correctly (None if no cases)."""
        return self.correct / self.total if self.total else None


def _ratio(numerator: int, denominator: int, metric: str) -> float | None:
    if denominator == 0:
        logger.warning(f"{metric} is undefined (no cases to divide by)")
        return None
    return numerator / denominator


def evaluate_batch(training_set: TrainingSet, cases: Iterable[LabeledCase]) -> EvaluationResult:
    """
    Classify every test case and tally the confusion buckets.

    Args:
        training_set: The trained model.
        cases: Labeled test cases.

    Returns:
        The aggregated EvaluationResult.
    """
    total = 0
    correct_ham = correct_spam = incorrect_ham = incorrect_spam = 0

    for case in cases:
        total += 1
        predicted = classify(training_set, case.text)

        if predicted is MessageClass.HAM:
            if case.true_class is MessageClass.HAM:
                correct_ham += 1
            else:
                incorrect_ham += 1
        else:
            if case.true_class is MessageClass.SPAM:
                correct_spam += 1
            else:
                incorrect_spam += 1

    logger.debug(
        f"Evaluated {total} cases: {correct_ham} correct ham, {correct_spam} correct spam, "
        f"{incorrect_ham} incorrect ham, {incorrect_spam} incorrect spam"
    )

    return EvaluationResult(
        total=total,
        correct_ham=correct_ham,
        correct_spam=correct_spam,
        incorrect_ham=incorrect_ham,
        incorrect_spam=incorrect_spam,
        accuracy_ham=_ratio(correct_ham, correct_ham + incorrect_spam, "ham accuracy"),
        accuracy_spam=_ratio(correct_spam, correct_spam + incorrect_ham, "spam accuracy"),
    )


def evaluate(training_set: TrainingSet, mode: Mode) -> EvaluationResult | MessageClass:
    """
    Evaluate a model in the given mode.

    Returns:
        An EvaluationResult for Batch mode, or the predicted MessageClass
        for SingleMessage mode.
    """
    if isinstance(mode, Batch):
        return evaluate_batch(training_set, mode.test_cases)
    if isinstance(mode, SingleMessage):
        return classify(training_set, mode.text)
    raise TypeError(f"Unknown evaluation mode: {mode!r}")
