from calcparse.extra.types import Associativity, Function, FunctionKind, Precedence

OPERATOR = FunctionKind.OPERATOR
ROUTINE = FunctionKind.ROUTINE
RIGHT = Associativity.RIGHT


BUILTIN_FUNCTIONS: tuple[Function, ...] = (
        # arithmetic
        Function("-", OPERATOR, 1, Precedence.PRIMARY, True),
        Function("^", OPERATOR, 2, Precedence.PRIMARY, False, RIGHT),
        Function("*", OPERATOR, 2, Precedence.MULTIPLICATIVE, True),
        Function("/", OPERATOR, 2, Precedence.MULTIPLICATIVE, False),
        Function("%", OPERATOR, 2, Precedence.MULTIPLICATIVE, False),
        Function("+", OPERATOR, 2, Precedence.ADDITIVE, True),
        Function("-", OPERATOR, 2, Precedence.ADDITIVE, False),

        # logical
        Function("!", OPERATOR, 1, Precedence.PRIMARY, True),
        Function("==", OPERATOR, 2, Precedence.COMPARISON, True),
        Function("!=", OPERATOR, 2, Precedence.COMPARISON, True),
        Function("<", OPERATOR, 2, Precedence.COMPARISON, False),
        Function("<=", OPERATOR, 2, Precedence.COMPARISON, False),
        Function(">", OPERATOR, 2, Precedence.COMPARISON, False),
        Function(">=", OPERATOR, 2, Precedence.COMPARISON, False),
        Function("&&", OPERATOR, 2, Precedence.LOGICAL_AND, False),
        Function("^^", OPERATOR, 2, Precedence.LOGICAL_AND, False),
        Function("||", OPERATOR, 2, Precedence.LOGICAL_OR, False),

        # routines
        Function("sqrt", ROUTINE, 1, Precedence.PRIMARY, True),
        Function("abs", ROUTINE, 1, Precedence.PRIMARY, True),
        Function("min", ROUTINE, 2, Precedence.PRIMARY, True),
        Function("max", ROUTINE, 2, Precedence.PRIMARY, True),
    )
