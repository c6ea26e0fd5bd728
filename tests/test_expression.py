import pytest

from calcparse.expression import FunctionCall, Literal, Variable, precedence, to_string
from calcparse.extra.types import Precedence
from calcparse.registry import default_registry


@pytest.mark.parametrize("literal, text",
    [
        (Literal(3.0), "3"),
        (Literal(0.5), "0.5"),
        (Literal(-2.0), "-2"),
        (Literal(float("inf")), "inf"),
        (Literal(float("nan")), "NaN"),
        (Literal(1.0, as_bool=True), "true"),
        (Literal(0.0, as_bool=True), "false"),
    ]
)
def test_literal_rendering(literal, text):
    assert to_string(literal) == text
    assert str(literal) == text


def test_call_rendering():
    registry = default_registry()
    call = FunctionCall(registry.lookup("max", 2), (Variable("a"), FunctionCall(registry.lookup("!", 1), (Literal(0.0),))))
    assert str(call) == "max(a, !(0))"


def test_precedence():
    registry = default_registry()
    assert precedence(Literal(1.0)) is Precedence.PRIMARY
    assert precedence(Variable("x")) is Precedence.PRIMARY
    call = FunctionCall(registry.lookup("||", 2), (Variable("a"), Variable("b")))
    assert precedence(call) is Precedence.LOGICAL_OR


def test_arity_invariant():
    with pytest.raises(ValueError):
        FunctionCall(default_registry().lookup("-", 2), (Literal(1.0),))


def test_unknown_node():
    with pytest.raises(TypeError):
        to_string("x")
    with pytest.raises(TypeError):
        precedence(1.0)
