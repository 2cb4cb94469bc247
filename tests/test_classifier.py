# =============================================================================
# Classifier Tests
# =============================================================================

import math

import pytest

from hamspam.bayes import classify, score, train
from hamspam.core import MessageClass


def test_free_classifies_as_spam(tiny_training_set):
    assert classify(tiny_training_set, "free") is MessageClass.SPAM


def test_hello_classifies_as_ham(tiny_training_set):
    assert classify(tiny_training_set, "hello friend") is MessageClass.HAM


def test_classification_is_deterministic(tiny_training_set):
    first = classify(tiny_training_set, "free hello there")
    second = classify(tiny_training_set, "free hello there")
    assert first is second


def test_out_of_vocabulary_message_is_spam(tiny_training_set):
    scores = score(tiny_training_set, "completely unknown words")
    assert scores.ham == 0.0
    assert scores.spam == 0.0
    assert scores.known_tokens == 0
    assert classify(tiny_training_set, "completely unknown words") is MessageClass.SPAM


def test_empty_message_is_spam(tiny_training_set):
    assert classify(tiny_training_set, "") is MessageClass.SPAM


def test_scores_are_summed_log10_probabilities(tiny_training_set):
    scores = score(tiny_training_set, "free unknown hello")

    expected_ham = math.log10(0.1) + math.log10(0.2)
    expected_spam = math.log10(3 / 11) + math.log10(1 / 11)
    assert scores.ham == pytest.approx(expected_ham)
    assert scores.spam == pytest.approx(expected_spam)
    assert scores.known_tokens == 2


def test_long_messages_do_not_underflow_into_ties():
    model = train(ham=["hello friend"], spam=["free money"])
    # 10**score underflows to 0.0 for both classes long before this length
    message = " ".join(["hello"] * 2000)

    scores = score(model, message)
    assert scores.ham > scores.spam
    assert classify(model, message) is MessageClass.HAM


def test_classify_docstring_example():
    model = train(["hello there friend"], ["free money now", "free gift now"])
    assert classify(model, "free") is MessageClass.SPAM
