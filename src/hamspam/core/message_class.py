# =============================================================================
# Message Class Model
# =============================================================================
# The two mutually exclusive classes a text message can belong to.
#
# Corpus files label every line with one of two fixed strings, "ham" or
# "spam". Anything else is an error - we never guess.
# =============================================================================

from enum import Enum


class UnknownClassLabelError(Exception):
    """Raised when a class label is neither "ham" nor "spam"."""

    def __init__(self, label: str, line_number: int | None = None) -> None:
        self.label = label
        self.line_number = line_number
        where = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid class {label!r}{where}")


class MessageClass(Enum):
    """
    Class of a text message.

    The enum value is the label used in corpus files.

    Usage:
        >>> MessageClass.from_label("spam")
        <MessageClass.SPAM: 'spam'>
        >>> str(MessageClass.HAM)
        'ham'
    """
    HAM = "ham"      # Legitimate message
    SPAM = "spam"    # Unsolicited junk

    @classmethod
    def from_label(cls, label: str, line_number: int | None = None) -> "MessageClass":
        """
        Map a corpus label to its class.

        Args:
            label: The label string, matched exactly.
            line_number: Optional line context for the error message.

        Raises:
            UnknownClassLabelError: If the label matches neither class.
        """
        for member in cls:
            if member.value == label:
                return member
        raise UnknownClassLabelError(label, line_number)

    def __str__(self) -> str:
        return self.value
