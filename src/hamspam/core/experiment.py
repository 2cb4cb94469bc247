# =============================================================================
# Experiment Model
# =============================================================================
# An experiment is the raw input for one analysis run:
#   - Training texts for each class (ham and spam)
#   - Labeled test cases (batch evaluation)
#   - An optional probe message (single-message classification)
#
# Preprocessing transforms rewrite an experiment in place, so every variant
# works on its own deep copy (see hamspam.analysis).
#
# The evaluation mode is an explicit value passed down the call chain:
#   - Batch(test_cases): tally predictions against known labels
#   - SingleMessage(text): classify one message
# =============================================================================

from dataclasses import dataclass, field

from hamspam.core.message_class import MessageClass


@dataclass(frozen=True)
class LabeledCase:
    """
    A message with its known class.

    Attributes:
        text: Raw message text.
        true_class: The class the corpus assigns to the message.
    """
    text: str
    true_class: MessageClass


@dataclass
class Experiment:
    """
    Raw input for an analysis run.

    Attributes:
        ham: Training texts labeled ham.
        spam: Training texts labeled spam.
        test_cases: Held-out labeled cases for batch evaluation.
        probe: Message to classify in single-message mode (None if unused).
    """
    ham: list[str] = field(default_factory=list)
    spam: list[str] = field(default_factory=list)
    test_cases: list[LabeledCase] = field(default_factory=list)
    probe: str | None = None

    @property
    def training_total(self) -> int:
        """Number of training messages across both classes."""
        return len(self.ham) + len(self.spam)


@dataclass(frozen=True)
class Batch:
    """Evaluate against a list of labeled test cases."""
    test_cases: tuple[LabeledCase, ...]


@dataclass(frozen=True)
class SingleMessage:
    """Classify a single message."""
    text: str


Mode = Batch | SingleMessage


def mode_for(experiment: Experiment) -> Mode:
    """
    Pick the evaluation mode an experiment was prepared for.

    An experiment with a probe message is classified in single-message mode;
    otherwise its test cases are evaluated in batch.
    """
    if experiment.probe is not None:
        return SingleMessage(experiment.probe)
    return Batch(tuple(experiment.test_cases))
