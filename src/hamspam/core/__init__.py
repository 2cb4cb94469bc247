# =============================================================================
# hamspam Core Module
# =============================================================================
# This module contains the core domain models for hamspam. These are pure
# Python dataclasses with no external dependencies - they can be imported
# anywhere without causing circular dependency issues.
#
# The core models represent:
#   - MessageClass: ham or spam
#   - LabeledCase: a message with its known class
#   - Experiment: training texts, test cases, and an optional probe message
#   - Batch / SingleMessage: the evaluation mode for a run
# =============================================================================

from hamspam.core.experiment import (
    Batch,
    Experiment,
    LabeledCase,
    Mode,
    SingleMessage,
    mode_for,
)
from hamspam.core.message_class import MessageClass, UnknownClassLabelError

__all__ = [
    "Batch",
    "Experiment",
    "LabeledCase",
    "MessageClass",
    "Mode",
    "SingleMessage",
    "UnknownClassLabelError",
    "mode_for",
]
