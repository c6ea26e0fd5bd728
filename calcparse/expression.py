from dataclasses import dataclass

from calcparse.extra.types import Function, Precedence
from calcparse.extra.utils import format_number


@dataclass(frozen=True)
class Literal:
    """
    Number, or boolean if 'as_bool' is set(any non-zero value is true)
    """
    value: float
    as_bool: bool = False

    def __str__(self) -> str:
        return to_string(self)


@dataclass(frozen=True)
class FunctionCall:
    """
    Application of an operator or a routine
    :param function: called Function
    :param args: arguments, exactly 'function.arity' of them
    """
    function: Function
    args: tuple["Expression", ...]

    def __post_init__(self):
        if len(self.args) != self.function.arity:
            raise ValueError(f"'{self.function.identifier}' takes {self.function.arity} argument(s), "
                             f"got {len(self.args)}")

    def __str__(self) -> str:
        return to_string(self)


@dataclass(frozen=True)
class Variable:
    identifier: str

    def __str__(self) -> str:
        return to_string(self)


Expression = Literal | FunctionCall | Variable


def precedence(expression: Expression) -> Precedence:
    if isinstance(expression, FunctionCall):
        return expression.function.precedence
    elif isinstance(expression, (Literal, Variable)):
        return Precedence.PRIMARY
    raise TypeError(f"Not an expression: {expression!r}")


def to_string(expression: Expression) -> str:
    """
    Renders the expression in call form: every call is written as 'identifier(arg0, arg1, ...)',
    so '1 + 2 * 3' gives '+(1, *(2, 3))'
    """
    if isinstance(expression, Literal):
        if expression.as_bool:
            return "true" if expression.value != 0 else "false"
        return format_number(expression.value)
    elif isinstance(expression, FunctionCall):
        args = ", ".join(to_string(arg) for arg in expression.args)
        return f"{expression.function.identifier}({args})"
    elif isinstance(expression, Variable):
        return expression.identifier
    raise TypeError(f"Not an expression: {expression!r}")
