"""Split raw METAR text into whitespace-delimited tokens."""

from typing import List, Optional


def tokenize(raw: str) -> List[str]:
    """
    Split a raw report into tokens.

    Any run of whitespace separates tokens, so an empty or blank string
    simply yields an empty list.
    """
    return raw.split()


class TokenStream:
    """
    Left-to-right cursor over the tokens of one report.

    Example:
        stream = TokenStream.from_text("EGLL 021250Z 23009KT")
        stream.pop()   # 'EGLL'
        stream.peek()  # '021250Z'
    """

    def __init__(self, tokens: List[str]):
        self._tokens = list(tokens)
        self._position = 0

    @classmethod
    def from_text(cls, raw: str) -> 'TokenStream':
        return cls(tokenize(raw))

    def peek(self) -> Optional[str]:
        """Next token without consuming it, or None at the end."""
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def pop(self) -> Optional[str]:
        """Consume and return the next token, or None at the end."""
        token = self.peek()
        if token is not None:
            self._position += 1
        return token

    def push_back(self) -> None:
        """Return the last consumed token to the stream."""
        if self._position == 0:
            raise IndexError("no token to push back")
        self._position -= 1

    def remaining(self) -> List[str]:
        return self._tokens[self._position:]

    def drain(self) -> List[str]:
        """Consume every remaining token."""
        rest = self.remaining()
        self._position = len(self._tokens)
        return rest

    def __bool__(self) -> bool:
        return self._position < len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens) - self._position
