from typing import Sequence

from calcparse.extra.types import Token


class TokenCursor:
    """
    Forward-only reader over the tokenizer output
    :param tokens: tokens to read
    :param end: source offset reported once every token has been read(usually length of the line)
    """
    def __init__(self, tokens: Sequence[Token], end: int = 0):
        self.tokens = tuple(tokens)
        self.end = end
        self.position = 0

    def read(self) -> Token | None:
        """
        Consumes a token
        :return: current token or None if all tokens have been read
        """
        token = self.peek()
        self.position += 1
        return token

    def peek(self) -> Token | None:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def discard(self) -> None:
        self.position += 1

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)

    @property
    def offset(self) -> int:
        """
        Source offset of the next token
        """
        token = self.peek()
        return self.end if token is None else token.offset
