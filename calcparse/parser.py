import logging

import calcparse.constants as cst
from calcparse.cursor import TokenCursor
from calcparse.expression import Expression, FunctionCall, Literal, Variable
from calcparse.extra.exceptions import (InvalidSyntaxError, NestingDepthError, UnknownOperatorError)
from calcparse.extra.types import Constant, Function, Precedence, String, Symbol, Token
from calcparse.extra.utils import format_number, log_exception
from calcparse.registry import Registry, default_registry
from calcparse.tokenizer import Tokenizer


def describe(token: Token | None) -> str:
    if token is None:
        return "end of input"
    elif isinstance(token, Constant):
        return format_number(token.value)
    elif isinstance(token, String):
        return f"'{token.text}'"
    return f"'{token.char}'"


class Parser:
    """
    Recursive descent parser with precedence climbing for binary operators
    :param registry: operators and routines known to the parser
    :param max_depth: maximum nesting of parenthesis, calls and operands
    :param logger: logger to use
    """
    def __init__(self, registry: Registry | None = None, max_depth: int = cst.MAX_NESTING_DEPTH,
                 logger: logging.Logger | None = None):
        self.registry = registry or default_registry()
        self.max_depth = max_depth
        self.logger = logger or logging.getLogger(__name__)
        self.tokenizer = Tokenizer(self.registry.all_identifiers())

    def parse(self, text: str) -> Expression:
        """
        Parses one line into an AST
        :param text: raw expression
        :return: root of the tree
        :raises ParseError: on the first violated expectation, no partial tree is returned
        """
        tokens = self.tokenizer.tokenize(text)
        return self.parse_tokens(tokens, text)

    @log_exception
    def parse_tokens(self, tokens: list[Token], text: str) -> Expression:
        cursor = TokenCursor(tokens, end=len(text))
        expression = self.parse_expression(cursor, 0)
        if not cursor.exhausted:
            token = cursor.peek()
            if token == Symbol(")"):
                raise InvalidSyntaxError("Unmatched ')'", cursor.offset, exc_type="unbalanced")
            self._unexpected(cursor, "end of input")
        self.logger.debug(f"{text} -> {expression}")
        return expression

    def parse_expression(self, cursor: TokenCursor, depth: int) -> Expression:
        lhs = self.parse_primary(cursor, depth)
        return self.parse_precedence(cursor, lhs, Precedence.LOGICAL_OR, depth)

    def parse_primary(self, cursor: TokenCursor, depth: int) -> Expression:
        """
        Consumes a single operand: parenthesized expression, call, prefix operator with its operand,
        variable or constant
        """
        if depth > self.max_depth:
            raise NestingDepthError(f"Expression is nested deeper than {self.max_depth} levels", cursor.offset)

        token = cursor.peek()
        offset = cursor.offset
        if isinstance(token, Constant):
            cursor.discard()
            return Literal(token.value)

        elif token == Symbol("("):
            cursor.discard()
            expression = self.parse_expression(cursor, depth + 1)
            self._expect(cursor, ")")
            return expression

        elif isinstance(token, String):
            cursor.discard()
            return self._parse_name(cursor, token, offset, depth)

        raise InvalidSyntaxError(f"Expected an expression, found {describe(token)}", offset,
                                 exc_type="expected_expression")

    def parse_precedence(self, cursor: TokenCursor, lhs: Expression, min_precedence: int,
                         depth: int) -> Expression:
        """
        Folds binary operators binding at least as tight as 'min_precedence' into 'lhs'
        :param cursor: token cursor positioned after 'lhs'
        :param lhs: already parsed left operand
        :param min_precedence: loosest precedence the loop may consume
        :param depth: nesting level of 'lhs'
        :return: combined expression
        """
        while True:
            operator = self._binary_operator(cursor.peek())
            if operator is None or operator.precedence < min_precedence:
                return lhs
            cursor.discard()

            rhs = self.parse_primary(cursor, depth + 1)
            if operator.is_right:
                rhs = self.parse_precedence(cursor, rhs, operator.precedence, depth + 1)
            else:
                rhs = self.parse_precedence(cursor, rhs, operator.precedence + 1, depth + 1)
            lhs = FunctionCall(operator, (lhs, rhs))

    def _parse_name(self, cursor: TokenCursor, token: String, offset: int, depth: int) -> Expression:
        name = token.text
        arities = self.registry.arities(name)
        if not arities:
            if cursor.peek() == Symbol("("):
                raise UnknownOperatorError(f"'{name}' is a variable and cannot be called", offset,
                                           exc_type="not_callable")
            return Variable(name)

        unary = self.registry.lookup(name, 1)
        if unary is not None and unary.is_operator:
            operand = self.parse_primary(cursor, depth + 1)
            return FunctionCall(unary, (operand,))

        if any(self.registry.lookup(name, arity).is_routine for arity in arities):
            return self._parse_call(cursor, name, offset, depth)

        raise UnknownOperatorError(f"'{name}' cannot be used as a prefix operator", offset,
                                   exc_type="not_prefix")

    def _parse_call(self, cursor: TokenCursor, name: str, offset: int, depth: int) -> FunctionCall:
        if cursor.peek() != Symbol("("):
            raise InvalidSyntaxError(f"Expected '(' after '{name}', found {describe(cursor.peek())}",
                                     cursor.offset, exc_type="unexpected_token")
        cursor.discard()

        args: list[Expression] = []
        if cursor.peek() == Symbol(")"):
            cursor.discard()
        else:
            while True:
                args.append(self.parse_expression(cursor, depth + 1))
                if cursor.peek() == Symbol(","):
                    cursor.discard()
                    continue
                self._expect(cursor, ")")
                break

        function = self.registry.lookup(name, len(args))
        if function is None or not function.is_routine:
            expected = " or ".join(str(arity) for arity in self.registry.arities(name))
            raise UnknownOperatorError(f"'{name}' takes {expected} argument(s) but {len(args)} were given",
                                       offset, exc_type="arity_mismatch")
        return FunctionCall(function, tuple(args))

    def _binary_operator(self, token: Token | None) -> Function | None:
        if not isinstance(token, String):
            return None
        function = self.registry.lookup(token.text, 2)
        if function is None or not function.is_operator:
            return None
        return function

    def _expect(self, cursor: TokenCursor, char: str) -> None:
        token = cursor.peek()
        if token == Symbol(char):
            cursor.discard()
            return
        if token is None:
            raise InvalidSyntaxError(f"Expected '{char}'", cursor.offset, exc_type="unbalanced")
        self._unexpected(cursor, f"'{char}'")

    def _unexpected(self, cursor: TokenCursor, expected: str):
        token = cursor.peek()
        if isinstance(token, String) and token.text in self.registry:
            raise UnknownOperatorError(f"'{token.text}' cannot be used as an infix operator", cursor.offset,
                                       exc_type="not_infix")
        raise InvalidSyntaxError(f"Unexpected {describe(token)}, expected {expected}", cursor.offset,
                                 exc_type="unexpected_token")


def parse(text: str) -> Expression:
    return Parser().parse(text)
