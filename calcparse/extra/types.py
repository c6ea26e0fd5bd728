from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Precedence(IntEnum):
    """
    Binding levels of operators and routines. A bigger value binds tighter
    """
    LOGICAL_OR = 1  # ||
    LOGICAL_AND = 2  # && ^^
    COMPARISON = 3  # == != < <= > >=
    ADDITIVE = 4  # + -
    MULTIPLICATIVE = 5  # * / %
    PRIMARY = 6  # ^, routines, unary operators, variables, literals


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class FunctionKind(Enum):
    OPERATOR = "operator"
    ROUTINE = "routine"


@dataclass(frozen=True)
class Function:
    """
    Class representing an operator or a routine
    :param identifier: name used in expressions, e.g. '+' or 'sqrt'
    :param kind: operators are written in prefix/infix form, routines as calls
    :param arity: exact number of arguments
    :param precedence: binding level
    :param commutative: operands order does not affect the result(informational)
    :param associativity: grouping of a chain of operators with the same precedence
    """
    identifier: str
    kind: FunctionKind
    arity: int
    precedence: Precedence
    commutative: bool = False
    associativity: Associativity = Associativity.LEFT

    @property
    def is_operator(self) -> bool:
        return self.kind is FunctionKind.OPERATOR

    @property
    def is_routine(self) -> bool:
        return self.kind is FunctionKind.ROUTINE

    @property
    def is_right(self) -> bool:
        return self.associativity is Associativity.RIGHT


@dataclass(frozen=True)
class Symbol:
    """
    Single punctuation character which is not an operator, e.g. '(' or ','
    """
    char: str
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Constant:
    """
    Numeric literal
    """
    value: float
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class String:
    """
    Bare word or operator spelling; resolved against the registry by the parser
    """
    text: str
    offset: int = field(default=0, compare=False)


Token = Symbol | Constant | String
