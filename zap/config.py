from __future__ import annotations
import os


# Defaults
# Forcing recurses on the host stack. At 20000, an `s`-based recursion such
# as `sum` reaches roughly 1000 levels (2000 raises RecursionError) and a
# `c` chain of forward references about 3000. Scale ZAP_RECURSION_LIMIT with
# the depth a program needs; very high values may also need a larger thread
# stack.
_DEFAULT_RECURSION_LIMIT = 20_000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_recursion_limit() -> int:
    """Minimum host recursion limit an Evaluator guarantees while forcing."""
    return int_from_env('ZAP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
