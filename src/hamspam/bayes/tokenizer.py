# =============================================================================
# Message Tokenizer and Vocabulary
# =============================================================================
# Turns raw message text into tokens and collects the vocabulary the model
# reasons about.
#
# Tokenization is deliberately dumb: split on whitespace, drop empty tokens.
# Anything smarter (punctuation, stemming, stop words) belongs to the
# preprocessing transforms, which rewrite the text before we ever see it.
# =============================================================================

from collections.abc import Iterable, Iterator


def tokenize(text: str) -> list[str]:
    """
    Split a message into whitespace-delimited tokens.

    Repeated delimiters never produce empty tokens.

    Example:
        >>> tokenize("free  money\\tnow")
        ['free', 'money', 'now']
    """
    return text.split()


class Vocabulary:
    """
    The set of distinct tokens seen across all training messages.

    Tokens keep the order in which they were first seen, so two vocabularies
    built from the same input compare and iterate identically.

    Usage:
        >>> vocab = Vocabulary.from_messages(["free money"], ["hello free"])
        >>> list(vocab)
        ['free', 'money', 'hello']
        >>> "money" in vocab
        True
    """

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        # dict keeps insertion order and gives O(1) membership
        self._tokens: dict[str, None] = dict.fromkeys(tokens)

    @classmethod
    def from_messages(cls, *message_lists: Iterable[str]) -> "Vocabulary":
        """
        Build a vocabulary from one or more lists of raw messages.

        Args:
            *message_lists: One list of messages per class.

        Returns:
            Vocabulary of every distinct non-empty token, in order of
            first appearance.
        """
        return cls(
            token
            for messages in message_lists
            for message in messages
            for token in tokenize(message)
        )

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return list(self._tokens) == list(other._tokens)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self)} tokens)"
