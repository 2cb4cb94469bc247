# =============================================================================
# Corpus Parser
# =============================================================================
# Reads a labeled corpus and splits it into training and test data.
#
# Corpus format: one message per line,
#
#   <label><delimiter><message text>
#
# where <label> is exactly "ham" or "spam" and the delimiter defaults to a
# single tab. Everything after the first delimiter is the message text.
#
# Bad lines are handled asymmetrically:
#   - No delimiter at all:          skipped with a warning
#   - Unknown label:                fatal (UnknownClassLabelError)
#   - Valid label, empty text:      fatal (MalformedRecordError)
#
# Line numbers in errors are 1-based positions in the file, before shuffling.
# =============================================================================

import logging
import random
from collections.abc import Iterable
from pathlib import Path

from hamspam.core import Experiment, LabeledCase, MessageClass

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "\t"
DEFAULT_TRAIN_RATIO = 0.75


# =============================================================================
# Exceptions
# =============================================================================

class CorpusError(Exception):
    """Raised when the corpus can't be read."""
    pass


class MalformedRecordError(CorpusError):
    """Raised when a labeled corpus line has no message text."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        super().__init__(f"Malformed record on line {line_number}: {reason}")


# =============================================================================
# Parsing
# =============================================================================

def parse_lines(lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> list[LabeledCase]:
    """
    Parse corpus lines into labeled cases.

    Args:
        lines: Corpus lines (trailing newlines are ignored).
        delimiter: Separator between label and text.

    Returns:
        Labeled cases in file order.

    Raises:
        UnknownClassLabelError: If a label is neither "ham" nor "spam".
        MalformedRecordError: If a labeled line has empty text.
    """
    if not delimiter:
        raise CorpusError("Delimiter must not be empty")

    cases: list[LabeledCase] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue

        label, found, text = line.partition(delimiter)
        if not found:
            logger.warning(f"Skipped line {line_number} because it has no class: {label!r}")
            continue

        true_class = MessageClass.from_label(label, line_number)
        if not text:
            raise MalformedRecordError(line_number, "empty message text")

        cases.append(LabeledCase(text=text, true_class=true_class))

    logger.debug(f"Parsed {len(cases)} labeled messages")
    return cases


def load_corpus(path: Path, delimiter: str = DEFAULT_DELIMITER) -> list[LabeledCase]:
    """
    Load and parse a corpus file.

    Raises:
        CorpusError: If the file can't be read or is malformed.
        UnknownClassLabelError: If a label is neither "ham" nor "spam".
    """
    logger.info(f"Loading corpus from {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return parse_lines(f, delimiter)
    except OSError as e:
        raise CorpusError(f"Cannot read corpus {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CorpusError(f"Corpus {path} is not valid UTF-8: {e}") from e


# =============================================================================
# Train/Test Split
# =============================================================================

def split(
    cases: list[LabeledCase],
    *,
    train_ratio: float = DEFAULT_TRAIN_RATIO,
    seed: int | None = None,
    probe: str | None = None,
) -> Experiment:
    """
    Shuffle labeled cases and split them into an Experiment.

    The first int(len(cases) * train_ratio) shuffled cases become training
    texts, the rest become test cases. With a probe message, every case is
    used for training and the probe is stored for single-message mode.

    Args:
        cases: Parsed corpus. Not modified.
        train_ratio: Share of cases used for training, strictly between 0 and 1
                     so both the training and the test side can be non-empty.
        seed: Shuffle seed for reproducible splits (None = random).
        probe: Optional message to classify instead of evaluating.

    Returns:
        The populated Experiment.
    """
    if not 0.0 < train_ratio < 1.0:
        raise ValueError(f"train_ratio must be between 0 and 1 (exclusive), got {train_ratio}")

    shuffled = list(cases)
    random.Random(seed).shuffle(shuffled)

    if probe is not None:
        train_count = len(shuffled)
    else:
        train_count = int(len(shuffled) * train_ratio)

    experiment = Experiment(probe=probe)
    for case in shuffled[:train_count]:
        if case.true_class is MessageClass.SPAM:
            experiment.spam.append(case.text)
        else:
            experiment.ham.append(case.text)
    experiment.test_cases.extend(shuffled[train_count:])

    logger.info(
        f"Split corpus: {len(experiment.ham)} ham + {len(experiment.spam)} spam for training, "
        f"{len(experiment.test_cases)} for testing"
    )
    return experiment
