import pytest

from zap.builtins import PRIMITIVES, CONSTANTS, Strategy
from zap.errors import ZapNotAPair, ZapNotApplicable


@pytest.mark.parametrize(
    "source,expected",
    [
        ("ap ap ap s add inc 1", "3"),          # add 1 (inc 1)
        ("ap ap ap s mul ap add 1 6", "42"),    # mul 6 (add 1 6)
        ("ap ap ap c add 1 2", "3"),
        ("ap ap ap c cons 1 2", "(2 . 1)"),
        ("ap ap ap b inc dec 5", "5"),
        ("ap ap ap b neg ap add 1 2", "-3"),
        ("ap i 7", "7"),
        ("ap ap t 1 2", "1"),
        ("ap ap f 1 2", "2"),
        ("ap ap ap s t i 9", "9"),              # t 9 (i 9)
    ]
)
def test_combinator_identities(env, evaluator, source, expected):
    assert evaluator.to_string(env.parse_expr(source)) == expected


def test_strategies_are_fixed_per_primitive():
    assert PRIMITIVES["s"].strategy is Strategy.LAZY
    assert PRIMITIVES["c"].strategy is Strategy.EAGER
    assert PRIMITIVES["b"].strategy is Strategy.EAGER
    assert PRIMITIVES["i"].strategy is Strategy.EAGER
    for name in ("inc", "dec", "neg", "add", "mul", "div", "eq", "lt", "isnil"):
        assert PRIMITIVES[name].strategy is Strategy.LAZY


def test_builtin_table_is_complete(env):
    names = set(PRIMITIVES) | set(CONSTANTS)
    assert names == {
        "inc", "dec", "neg", "add", "mul", "div", "eq", "lt", "isnil",
        "s", "c", "b", "i", "t", "f", "cons", "car", "cdr", "nil",
    }
    for name in names:
        assert env.lookup(name).is_value


def test_s_builds_a_thunk(env, evaluator):
    expr = env.parse_expr("ap ap ap s cons i 1")
    assert not expr.is_value
    assert evaluator.to_string(expr) == "(1 . 1)"


def test_c_and_b_reduce_on_application(env, evaluator):
    # c cons 1 2 = cons 2 1, reduced while parsing
    assert env.parse_expr("ap ap ap c cons 1 2").is_value
    # b car (cons 1) 2 = car (cons 1 2), also reduced while parsing
    assert env.parse_expr("ap ap ap b car ap cons 1 2").is_value
    assert evaluator.count == 0


def test_s_self_application_is_never_forced_when_discarded(env, evaluator):
    expr = env.parse_expr("ap ap t 1 ap ap ap s i i ap ap s i i")
    assert evaluator.to_string(expr) == "1"


def test_i_returns_its_argument_unforced(env):
    arg = env.parse_expr("ap inc 1")
    assert env.lookup("i").apply(arg) is arg


# -----------------------------------------------------
# nil and pairs used as functions
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("ap ap ap nil 5 1 2", "1"),
        ("ap ap ap nil fail 1 2", "1"),
        ("ap ap ap cons 1 2 t", "1"),
        ("ap ap ap cons 1 2 f", "2"),
        ("ap ap ap cons 3 4 add", "7"),
    ]
)
def test_nil_and_pairs_as_functions(env, evaluator, source, expected):
    assert evaluator.to_string(env.parse_expr(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("ap ap ap isnil nil 1 2", "1"),
        ("ap ap ap isnil ap ap cons 1 2 1 2", "2"),
        ("ap ap ap isnil ap ap cons fail fail 1 2", "2"),
        # function-encoded pair: c (c i 7) 8 = \s. s 7 8
        ("ap ap ap isnil ap ap c ap ap c i 7 8 1 2", "2"),
        # function-encoded nil: t t = \x. t
        ("ap ap ap isnil ap t t 1 2", "1"),
    ]
)
def test_isnil(env, evaluator, source, expected):
    assert evaluator.to_string(env.parse_expr(source)) == expected


@pytest.mark.parametrize("source", ["ap isnil 5", "ap isnil i", "ap isnil inc"])
def test_isnil_rejects_non_lists(env, evaluator, source):
    with pytest.raises(ZapNotAPair):
        evaluator.to_value(env.parse_expr(source))


@pytest.mark.parametrize("source", ["ap car 1", "ap cdr nil", "ap car inc"])
def test_car_cdr_of_forced_non_pairs(env, source):
    with pytest.raises(ZapNotAPair):
        env.parse_expr(source)


@pytest.mark.parametrize("source", ["ap car ap inc 1", "ap cdr ap ap ap isnil nil nil 1"])
def test_car_cdr_of_thunks_fail_when_forced(env, evaluator, source):
    expr = env.parse_expr(source)
    with pytest.raises(ZapNotAPair):
        evaluator.to_value(expr)


def test_applying_a_number_fails_when_forced(env, evaluator):
    expr = env.parse_expr("ap ap ap add 1 2 3")
    with pytest.raises(ZapNotApplicable):
        evaluator.to_value(expr)
