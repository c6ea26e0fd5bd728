import logging
from enum import Enum
from typing import Iterable

from calcparse.extra.exceptions import TokenizationError
from calcparse.extra.types import Constant, String, Symbol, Token
from calcparse.extra.utils import log_exception
from calcparse.registry import default_registry


class Category(Enum):
    ALPHA = "alpha"
    DIGIT = "digit"
    WHITESPACE = "whitespace"
    SYMBOL = "symbol"

    @classmethod
    def of(cls, s: str) -> "Category":
        if s.isalpha() or s == "_":
            return cls.ALPHA
        elif s.isdecimal() or s == ".":
            return cls.DIGIT
        elif s.isspace():
            return cls.WHITESPACE
        return cls.SYMBOL


def categorize(text: str) -> list[tuple[Category, str]]:
    """
    First phase of tokenization: splits the text into maximal runs of one category
    :param text: raw expression
    :return: list of (category, run) in order; joined runs give back the text
    """
    segments: list[tuple[Category, str]] = []
    start = 0
    prev_cat: Category | None = None
    for i, s in enumerate(text):
        cur_cat = Category.of(s)
        if prev_cat is not None and cur_cat != prev_cat:
            segments.append((prev_cat, text[start:i]))
            start = i
        prev_cat = cur_cat
    if prev_cat is not None:
        segments.append((prev_cat, text[start:]))
    return segments


def parse_number(segment: str, offset: int) -> float:
    """
    Converts digit run to float
    :raises TokenizationError: more than one '.' or no digits at all
    """
    if segment.count(".") > 1:
        raise TokenizationError(f"Malformed number '{segment}': more than one decimal point", offset)
    try:
        return float(segment)
    except ValueError:
        raise TokenizationError(f"Malformed number '{segment}'", offset) from None


def split_symbols(segment: str, offset: int, identifiers: frozenset[str] | set[str],
                  max_len: int | None = None) -> list[Token]:
    """
    Greedy longest-match split of a symbol run, so that '>=-' gives ['>=', '-'] and not ['>', '=', '-']
    :param segment: run of symbol characters
    :param offset: offset of the run in the source line
    :param identifiers: operator spellings to be kept whole
    :param max_len: length of the longest identifier
    """
    if max_len is None:
        max_len = max(map(len, identifiers), default=1)
    tokens: list[Token] = []
    start = 0
    while start < len(segment):
        end = min(len(segment), start + max_len)
        while end - start > 1 and segment[start:end] not in identifiers:
            end -= 1
        sub = segment[start:end]
        if sub in identifiers:
            tokens.append(String(sub, offset + start))
        else:
            tokens.append(Symbol(sub, offset + start))
        start = end
    return tokens


class Tokenizer:
    """
    Converts an expression to a flat list of tokens
    :param identifiers: names of every operator and routine
    :param logger: logger to use
    """
    def __init__(self, identifiers: Iterable[str] | None = None, logger: logging.Logger | None = None):
        if identifiers is None:
            identifiers = default_registry().all_identifiers()
        self.identifiers = frozenset(identifiers)
        self.max_len = max(map(len, self.identifiers), default=1)
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def tokenize(self, text: str) -> list[Token]:
        """
        Tokenizes the expression
        :param text: raw expression
        :return: list of tokens, whitespace dropped
        :raises TokenizationError: malformed numeric literal
        """
        tokens: list[Token] = []
        offset = 0
        for category, segment in categorize(text):
            if category is Category.ALPHA:
                tokens.append(String(segment, offset))
            elif category is Category.DIGIT:
                tokens.append(Constant(parse_number(segment, offset), offset))
            elif category is Category.SYMBOL:
                tokens.extend(split_symbols(segment, offset, self.identifiers, self.max_len))
            offset += len(segment)

        self.logger.debug(f"{tokens=}")
        return tokens


def tokenize(text: str, operator_identifiers: Iterable[str] | None = None) -> list[Token]:
    return Tokenizer(operator_identifiers).tokenize(text)
