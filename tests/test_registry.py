import pytest

from calcparse.extra.types import Function, FunctionKind, Precedence
from calcparse.registry import Registry, default_registry
from calcparse.vars import BUILTIN_FUNCTIONS


def test_arity_overloaded_lookup():
    registry = default_registry()
    unary = registry.lookup("-", 1)
    binary = registry.lookup("-", 2)
    assert unary is not None and binary is not None
    assert unary != binary
    assert unary.precedence is Precedence.PRIMARY
    assert binary.precedence is Precedence.ADDITIVE
    assert registry.lookup("-", 3) is None
    assert registry.lookup("x", 1) is None


def test_all_identifiers():
    assert default_registry().all_identifiers() == {
        "-", "^", "*", "/", "%", "+", "!", "==", "!=", "<", "<=", ">", ">=", "&&", "^^", "||",
        "sqrt", "abs", "min", "max",
    }


@pytest.mark.parametrize("identifier, arities",
    [
        ("-", (1, 2)),
        ("!", (1,)),
        ("max", (2,)),
        ("x", ()),
    ]
)
def test_arities(identifier, arities):
    assert default_registry().arities(identifier) == arities


def test_metadata():
    registry = default_registry()
    assert registry.lookup("^", 2).is_right
    assert not registry.lookup("-", 2).is_right
    assert registry.lookup("+", 2).commutative
    assert not registry.lookup("/", 2).commutative
    assert registry.lookup("sqrt", 1).is_routine
    assert registry.lookup("==", 2).is_operator
    assert registry.lookup("||", 2).precedence < registry.lookup("&&", 2).precedence


def test_default_registry_is_shared():
    registry = default_registry()
    assert registry is default_registry()
    assert len(registry) == len(BUILTIN_FUNCTIONS)
    assert list(registry) == list(BUILTIN_FUNCTIONS)
    assert "sqrt" in registry
    assert "y" not in registry


def test_duplicate_rejected():
    functions = [
        Function("<<", FunctionKind.OPERATOR, 2, Precedence.MULTIPLICATIVE),
        Function("<<", FunctionKind.OPERATOR, 2, Precedence.ADDITIVE),
    ]
    with pytest.raises(ValueError):
        Registry(functions)


def test_zero_arity_rejected():
    with pytest.raises(ValueError):
        Registry([Function("pi", FunctionKind.ROUTINE, 0, Precedence.PRIMARY)])
