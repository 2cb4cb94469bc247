# =============================================================================
# Experiment Variant Runner
# =============================================================================
# Runs the full pipeline once per preprocessing variant:
#
#   copy experiment -> apply transforms -> train -> evaluate
#
# Every variant gets its own deep copy of the experiment and trains its own
# model, so variants can't influence each other and their order doesn't
# change any result.
#
# Default variants, in report order:
#   1. Default Analysis (no preprocessing)
#   2. No Punctuation Analysis
#   3. Stemmer Analysis
#   4. Stemmer and No Punctuation Analysis
#   5. Remove N Most Common English Words
#
# Adding a variant means adding a Variant to the list - the runner itself
# doesn't know about specific transforms.
# =============================================================================

import copy
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from hamspam.bayes import EvaluationResult, TrainingSet, evaluate, train_experiment
from hamspam.core import Experiment, MessageClass, mode_for
from hamspam.preprocessing import RemoveCommonWords, RemovePunctuation, Stem, Transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Variant:
    """
    A named preprocessing pipeline.

    Attributes:
        name: Human-readable name shown in reports.
        transforms: Transforms applied in order (empty = no preprocessing).
    """
    name: str
    transforms: tuple[Transform, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one variant run.

    Exactly one of `evaluation` (batch mode) or `prediction` (single-message
    mode) is set.

    Attributes:
        name: Variant name.
        training_set: The model trained for this variant.
        evaluation: Batch evaluation results.
        prediction: Predicted class of the probe message.
    """
    name: str
    training_set: TrainingSet
    evaluation: EvaluationResult | None = None
    prediction: MessageClass | None = None


def default_variants(common_words: int = 100) -> list[Variant]:
    """
    Build the standard five variants.

    Args:
        common_words: How many common English words the last variant removes.
    """
    return [
        Variant("Default Analysis (no preprocessing)"),
        Variant("No Punctuation Analysis", (RemovePunctuation(),)),
        Variant("Stemmer Analysis", (Stem(),)),
        Variant("Stemmer and No Punctuation Analysis", (Stem(), RemovePunctuation())),
        Variant(
            f"Remove {common_words} Most Common English Words",
            (RemoveCommonWords(common_words),),
        ),
    ]


def analyze(experiment: Experiment, variant: Variant) -> AnalysisResult:
    """
    Run one variant on a private copy of the experiment.

    The experiment passed in is never modified.

    Raises:
        DegenerateStatisticError: If a class has no training messages.
    """
    working = copy.deepcopy(experiment)
    for transform in variant.transforms:
        transform.apply(working)

    training_set = train_experiment(working)
    outcome = evaluate(training_set, mode_for(working))
    logger.info(f"{variant.name}: vocabulary of {len(training_set.vocabulary)} tokens")

    if isinstance(outcome, EvaluationResult):
        return AnalysisResult(variant.name, training_set, evaluation=outcome)
    return AnalysisResult(variant.name, training_set, prediction=outcome)


def run(experiment: Experiment, variants: Sequence[Variant] | None = None) -> list[AnalysisResult]:
    """
    Run every variant and collect the results in variant order.

    Args:
        experiment: Raw experiment. Not modified.
        variants: Variants to run (default: default_variants()).

    Returns:
        One AnalysisResult per variant.
    """
    if variants is None:
        variants = default_variants()
    return [analyze(experiment, variant) for variant in variants]
