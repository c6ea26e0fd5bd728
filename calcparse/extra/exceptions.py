from typing import Literal


class ParseError(Exception):
    """
    Base class for every error raised while parsing an expression
    :param message: what was expected
    :param offset: position in the source line where parsing stopped
    """
    def __init__(self, message: str, offset: int | None = None, exc_type: str = ""):
        if offset is not None:
            super().__init__(f"{message} at offset {offset}")
        else:
            super().__init__(message)
        self.message = message
        self.offset = offset
        self.exc_type = exc_type


class TokenizationError(ParseError):
    def __init__(self, message, offset: int | None = None,
                 *, exc_type: Literal["malformed_number"] = "malformed_number"):
        super().__init__(message, offset, exc_type)


class InvalidSyntaxError(ParseError):
    def __init__(self, message, offset: int | None = None, *,
                 exc_type: Literal["expected_expression", "unexpected_token", "unbalanced"]):
        super().__init__(message, offset, exc_type)


class UnknownOperatorError(ParseError):
    def __init__(self, message, offset: int | None = None, *,
                 exc_type: Literal["arity_mismatch", "not_callable", "not_prefix", "not_infix"]):
        super().__init__(message, offset, exc_type)


class NestingDepthError(ParseError):
    def __init__(self, message, offset: int | None = None, *, exc_type: Literal["too_deep"] = "too_deep"):
        super().__init__(message, offset, exc_type)
