"""Demo: evaluate fixed-point engine functions on decimal operands.

Usage:
  python scripts/demo.py eval mul 1.5 2.25      # one function, raw + decimal output
  python scripts/demo.py tour                   # run every registered scenario
  python scripts/demo.py tour --only S2a,S3b    # run a subset

Scenarios covered by `tour`:
S1a) scaling & rounding (mul/div/floor/ceil/frac/avg)
S2a) exponential family (exp2/exp)
S2b) logarithmic family (log2/ln/log10, exact powers of ten)
S3a) power & root family (pow/sqrt/gm)
S3b) error taxonomy (each typed failure once)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence
import argparse
import sys

import fixed18 as fx
from fixed18.core.exc import FixedPointError

# Engine functions reachable from the command line, by arity.
UNARY: Dict[str, Callable[[int], int]] = {
    "abs": fx.abs,
    "floor": fx.floor,
    "ceil": fx.ceil,
    "frac": fx.frac,
    "inv": fx.inv,
    "exp2": fx.exp2,
    "exp": fx.exp,
    "log2": fx.log2,
    "ln": fx.ln,
    "log10": fx.log10,
    "sqrt": fx.sqrt,
}

BINARY: Dict[str, Callable[[int, int], int]] = {
    "mul": fx.mul,
    "div": fx.div,
    "avg": fx.avg,
    "gm": fx.gm,
}


# ---------- pretty printers ----------

def brief(x: int) -> str:
    return f"{fx.fmt_fixed(x)} (raw={x})"


def print_call(name: str, operands: Sequence[int], fn: Callable[..., int]) -> bool:
    """Print `name(operands) = result`; on a typed failure print the error instead."""
    args = ", ".join(fx.fmt_fixed(a) for a in operands)
    try:
        result = fn(*operands)
    except FixedPointError as exc:
        print(f"  • {name}({args}) -> {type(exc).__name__}: {exc}")
        return False
    print(f"  • {name}({args}) = {brief(result)}")
    return True


# ---------- single evaluation ----------

def evaluate(name: str, operands: List[str]) -> int:
    """Evaluate one engine function on decimal operands; returns a process exit code."""
    if name == "pow":
        if len(operands) != 2:
            print("pow expects a base and an integer exponent", file=sys.stderr)
            return 2
        try:
            base = fx.from_decimal(Decimal(operands[0]))
            n = int(operands[1])
        except (FixedPointError, ArithmeticError, ValueError) as exc:
            print(f"invalid operand: {exc}", file=sys.stderr)
            return 2
        ok = print_call(f"pow[n={n}]", [base], lambda x: fx.pow(x, n))
        return 0 if ok else 1
    if name in UNARY:
        fn, arity = UNARY[name], 1
    elif name in BINARY:
        fn, arity = BINARY[name], 2
    else:
        print(f"unknown function: {name}", file=sys.stderr)
        return 2
    if len(operands) != arity:
        print(f"{name} expects {arity} operand(s), got {len(operands)}", file=sys.stderr)
        return 2
    try:
        values = [fx.from_decimal(Decimal(op)) for op in operands]
    except (FixedPointError, ArithmeticError, ValueError) as exc:
        print(f"invalid operand: {exc}", file=sys.stderr)
        return 2
    return 0 if print_call(name, values, fn) else 1


# ---------- scenario registry ----------

class Scenario:
    def __init__(self, sid: str, title: str, fn: Callable[[], None]):
        self.sid = sid
        self.title = title
        self.fn = fn

scenarios: List[Scenario] = []

def add(sid: str, title: str, fn: Callable[[], None]) -> None:
    scenarios.append(Scenario(sid, title, fn))


def _d(s: str) -> int:
    return fx.from_decimal(Decimal(s))


def _scaling() -> None:
    print_call("mul", [_d("2"), _d("3")], fx.mul)
    print_call("mul", [_d("-1.5"), _d("1.5")], fx.mul)
    print_call("div", [_d("1"), _d("3")], fx.div)
    print_call("floor", [-1], fx.floor)
    print_call("ceil", [_d("2.1")], fx.ceil)
    print_call("frac", [_d("-1.25")], fx.frac)
    print_call("avg", [fx.MAX, fx.MAX], fx.avg)


def _exponential() -> None:
    print_call("exp2", [_d("0.5")], fx.exp2)
    print_call("exp2", [_d("10")], fx.exp2)
    print_call("exp", [_d("1")], fx.exp)


def _logarithmic() -> None:
    print_call("log2", [_d("3")], fx.log2)
    print_call("ln", [fx.e()], fx.ln)
    print_call("log10", [_d("1000")], fx.log10)
    print_call("log10", [_d("0.001")], fx.log10)


def _power() -> None:
    print_call("pow[n=10]", [_d("2")], lambda x: fx.pow(x, 10))
    print_call("sqrt", [_d("2")], fx.sqrt)
    print_call("gm", [_d("2"), _d("8")], fx.gm)


def _errors() -> None:
    print_call("div", [_d("1"), 0], fx.div)
    print_call("log2", [0], fx.log2)
    print_call("abs", [fx.MIN], fx.abs)
    print_call("mul", [fx.MAX, _d("2")], fx.mul)


add("S1a", "S1a) scaling & rounding", _scaling)
add("S2a", "S2a) exponential family", _exponential)
add("S2b", "S2b) logarithmic family", _logarithmic)
add("S3a", "S3a) power & root family", _power)
add("S3b", "S3b) error taxonomy", _errors)


def tour(only: Optional[str] = None, skip: Optional[str] = None) -> int:
    only_ids = {s.strip() for s in only.split(",")} if only else None
    skip_ids = {s.strip() for s in skip.split(",")} if skip else set()
    for sc in scenarios:
        if only_ids is not None and sc.sid not in only_ids:
            continue
        if sc.sid in skip_ids:
            continue
        print("\n" + "=" * 80)
        print(f"Scenario: {sc.title}")
        sc.fn()
    return 0


# ---------- entry point ----------

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="fixed18 engine demo")
    sub = parser.add_subparsers(dest="command", required=True)

    p_eval = sub.add_parser("eval", help="Evaluate one function on decimal operands")
    p_eval.add_argument("function", help="Engine function name (e.g. mul, log2, pow)")
    p_eval.add_argument("operands", nargs="+", help="Decimal operands (pow takes base and integer exponent)")

    p_tour = sub.add_parser("tour", help="Run the registered scenarios")
    p_tour.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1a,S3b)")
    p_tour.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.command == "eval":
        return evaluate(args.function, args.operands)
    return tour(only=args.only, skip=args.skip)


if __name__ == "__main__":
    raise SystemExit(main())
