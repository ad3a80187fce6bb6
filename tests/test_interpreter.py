import pytest

from zap.config import get_recursion_limit, int_from_env
from zap.debug_utils.debug_string import debug_string
from zap.errors import ZapNotAList, ZapNotANumber
from zap.evaluation.apply import apply
from zap.evaluation.evaluator import ensure_recursion_limit
from zap.evaluation.modulatable import ModNum, ModList, ModCons
from zap.interpreter import Interpreter
from zap.types.point import Point


def test_eval_renders_canonical_strings(interp):
    assert interp.eval("ap ap cons 1 ap ap cons 2 nil") == "[1, 2]"
    assert interp.eval("ap ap cons 1 2") == "(1 . 2)"


def test_definitions_persist_across_calls():
    itp = Interpreter()
    assert itp.define("double = ap ap s add i") == 1
    itp.define("quad = ap ap b double double")
    assert itp.eval("ap quad 5") == "20"


def test_count_tracks_forcing(interp):
    assert interp.count == 0
    interp.eval("ap inc ap inc 1")
    assert interp.count == 2


def test_materialize(interp):
    assert interp.materialize("ap ap cons 1 ap ap cons ap ap cons 2 nil nil") == ModList(
        (ModNum(1), ModList((ModNum(2),)))
    )


def test_point_to_expr(interp):
    expr = Point(3, -4).to_expr()
    assert interp.evaluator.to_modulatable(expr) == ModCons(ModNum(3), ModNum(-4))


def test_interact_applies_state_then_point(interp):
    interp.define("program = cons")
    program = interp.parse("program")
    state = interp.parse("ap ap cons 0 nil")
    result = interp.interact(program, state, Point(1, 2))
    assert interp.evaluator.to_string(result) == "([0] . (1 . 2))"


def test_interact_result_is_unforced(interp):
    # add 10 (1 . 2) is not a number; that only surfaces once forced
    interp.define("program = add")
    result = interp.interact(interp.parse("program"), interp.parse("10"), Point(1, 2))
    assert not result.is_value
    assert interp.count == 0
    with pytest.raises(ZapNotANumber):
        interp.evaluator.to_value(result)


def test_variadic_apply(env, evaluator):
    expr = apply(env.lookup("add"), env.parse_expr("1"), env.parse_expr("2"))
    assert evaluator.to_string(expr) == "3"
    assert apply(env.lookup("nil")) is env.lookup("nil")


# -----------------------------------------------------
# Debug strings
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", "5"),
        ("nil", "nil"),
        ("ap ap cons 1 2", "ap ap cons 1 2"),
        ("ap ap cons ap inc 1 ap ap cons -2 nil", "ap ap cons 2 ap ap cons -2 nil"),
    ]
)
def test_debug_string(env, evaluator, source, expected):
    assert debug_string(evaluator, env.parse_expr(source)) == expected


def test_debug_string_parses_back(env, evaluator):
    source = "ap ap cons ap ap cons 1 2 ap ap cons ap ap add 3 4 nil"
    rendered = debug_string(evaluator, env.parse_expr(source))
    again = evaluator.to_modulatable(env.parse_expr(rendered))
    assert again == evaluator.to_modulatable(env.parse_expr(source))


def test_debug_string_rejects_functions(env, evaluator):
    with pytest.raises(ZapNotAList):
        debug_string(evaluator, env.parse_expr("ap ap cons inc nil"))


# -----------------------------------------------------
# Configuration
# -----------------------------------------------------

def test_recursion_limit_from_env(monkeypatch):
    monkeypatch.setenv("ZAP_RECURSION_LIMIT", "50000")
    assert get_recursion_limit() == 50000


@pytest.mark.parametrize("raw", ["", "lots", "1.5"])
def test_recursion_limit_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("ZAP_RECURSION_LIMIT", raw)
    assert get_recursion_limit() == 20_000


def test_int_from_env_unset(monkeypatch):
    monkeypatch.delenv("ZAP_TEST_UNSET", raising=False)
    assert int_from_env("ZAP_TEST_UNSET", 7) == 7


def test_recursion_limit_is_never_lowered():
    import sys
    before = sys.getrecursionlimit()
    ensure_recursion_limit(10)
    assert sys.getrecursionlimit() == before
