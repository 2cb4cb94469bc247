# =============================================================================
# Bayes Module
# =============================================================================
# The statistical core: a two-class, bag-of-words Naive Bayes model.
#
#   tokenizer   - whitespace tokens and the shared vocabulary
#   model       - word counts, smoothed likelihoods, priors
#   classifier  - log-space scoring and the decision rule
#   evaluation  - batch tallies and single-message verdicts
#
# Nothing here touches files, randomness, or preprocessing. It consumes
# already-transformed text and returns plain data.
# =============================================================================

from hamspam.bayes.classifier import Scores, classify, score
from hamspam.bayes.evaluation import EvaluationResult, evaluate, evaluate_batch
from hamspam.bayes.model import (
    ClassModel,
    DegenerateStatisticError,
    FrequencyTable,
    TrainingSet,
    count_words,
    estimate,
    train,
    train_experiment,
)
from hamspam.bayes.tokenizer import Vocabulary, tokenize

__all__ = [
    "ClassModel",
    "DegenerateStatisticError",
    "EvaluationResult",
    "FrequencyTable",
    "Scores",
    "TrainingSet",
    "Vocabulary",
    "classify",
    "count_words",
    "estimate",
    "evaluate",
    "evaluate_batch",
    "score",
    "tokenize",
    "train",
    "train_experiment",
]
