from timeit import timeit

from zap.interpreter import Interpreter


# Programs are defined once per Interpreter; each round parses and forces a
# fresh application so memoization does not hide the work being measured.

SUM_DEFS = "sum = ap ap s ap ap c ap eq 0 0 ap ap s add ap ap b sum dec"

COUNTDOWN_DEFS = "countdown = ap ap s ap ap c ap eq 0 nil ap ap s cons ap ap b countdown dec"


def time_program(defs: str, code: str, rounds: int) -> tuple[float, int]:
    """Time forcing `code` to a string; also report thunks forced per round."""
    itp = Interpreter()
    itp.define(defs)
    itp.eval(code)  # Warmup
    before = itp.count
    itp.eval(code)
    forced = itp.count - before
    return timeit(lambda: itp.eval(code), number=rounds), forced


def _print_program(name: str, defs: str, code: str, rounds: int) -> None:
    t, forced = time_program(defs, code, rounds)
    print(f"Benchmark: {name}")
    print(f"  time: {t:.6f}s  |  thunks forced per round: {forced}  [rounds={rounds}]")


if __name__ == "__main__":
    _print_program("recursive sum 1..500", SUM_DEFS, "ap sum 500", rounds=50)
    _print_program("countdown list of 300", COUNTDOWN_DEFS, "ap countdown 300", rounds=50)
    _print_program("s i i under t", "", "ap ap t 1 ap ap ap s i i ap ap s i i", rounds=20000)
