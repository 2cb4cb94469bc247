# =============================================================================
# Variant Runner Tests
# =============================================================================

import copy
from itertools import combinations

import pytest

from hamspam.analysis import Variant, default_variants, run
from hamspam.bayes import DegenerateStatisticError
from hamspam.core import Experiment, MessageClass
from hamspam.preprocessing import RemovePunctuation

VARIANT_NAMES = [
    "Default Analysis (no preprocessing)",
    "No Punctuation Analysis",
    "Stemmer Analysis",
    "Stemmer and No Punctuation Analysis",
    "Remove 100 Most Common English Words",
]


def test_runs_five_variants_in_order(sample_experiment):
    results = run(sample_experiment)
    assert [result.name for result in results] == VARIANT_NAMES


def test_batch_mode_results(sample_experiment):
    for result in run(sample_experiment):
        assert result.prediction is None
        assert result.evaluation is not None
        assert result.evaluation.total == 2


def test_each_variant_has_its_own_vocabulary(sample_experiment):
    vocabularies = [list(result.training_set.vocabulary) for result in run(sample_experiment)]
    for first, second in combinations(vocabularies, 2):
        assert first != second


def test_experiment_is_not_modified(sample_experiment):
    before = copy.deepcopy(sample_experiment)
    run(sample_experiment)
    assert sample_experiment == before


def test_single_message_mode():
    experiment = Experiment(
        ham=["hello there friend"],
        spam=["free money now", "free gift now"],
        probe="free",
    )

    results = run(experiment)

    assert len(results) == 5
    for result in results:
        assert result.evaluation is None
        assert result.prediction is MessageClass.SPAM


def test_common_words_count_in_variant_name():
    assert default_variants(common_words=50)[-1].name == "Remove 50 Most Common English Words"


def test_custom_variants():
    experiment = Experiment(ham=["hi, friend"], spam=["win, now"], probe="win,")
    variants = [Variant("Raw"), Variant("Clean", (RemovePunctuation(),))]

    results = run(experiment, variants)

    assert [result.name for result in results] == ["Raw", "Clean"]
    assert "win," in results[0].training_set.vocabulary
    assert "win" in results[1].training_set.vocabulary


def test_empty_class_propagates():
    with pytest.raises(DegenerateStatisticError):
        run(Experiment(ham=["hello"], spam=[], probe="hello"))
