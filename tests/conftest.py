# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the hamspam test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from hamspam.bayes import train
from hamspam.core import Experiment, LabeledCase, MessageClass


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tiny_training_set():
    """
    A model trained on one ham and two spam messages.

    "hello" leans ham, "free" leans spam.
    """
    return train(
        ham=["hello there friend"],
        spam=["free money now", "free gift now"],
    )


@pytest.fixture
def sample_experiment():
    """An experiment with punctuation, plurals, and common words."""
    return Experiment(
        ham=["Hello, the friends are running!"],
        spam=["Free prizes, call now!", "Winning the free gifts"],
        test_cases=[
            LabeledCase("Hello friends!", MessageClass.HAM),
            LabeledCase("Free prizes now!", MessageClass.SPAM),
        ],
    )


@pytest.fixture
def corpus_lines():
    """Twenty well-formed corpus lines, half ham and half spam."""
    ham = [f"ham\they are we still on for lunch {i}" for i in range(10)]
    spam = [f"spam\tFREE entry win cash prize call now {i}" for i in range(10)]
    return ham + spam


@pytest.fixture
def corpus_file(temp_dir, corpus_lines):
    """Write the sample corpus to a file."""
    path = temp_dir / "trainingData.data"
    path.write_text("\n".join(corpus_lines) + "\n", encoding="utf-8")
    return path
