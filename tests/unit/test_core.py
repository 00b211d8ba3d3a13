def _banner(title: str):
    print("\n" + "="*12 + f" {title} " + "="*12)

print("\n[DEBUG] Starting core import and constants baseline tests...")

# Stage 1: import self-check
def test_sanity_imports():
    """Verify that core submodules import without circular errors."""
    from fixed18.core import (
        FixedNumber,
        mul,
        div,
        exp2,
        log2,
        pow,
        sqrt,
        gm,
        SCALE,
        HALF_SCALE,
        MAX,
        MIN,
    )

    _banner("SANITY: imports")
    print("[DEBUG] Successfully imported all core symbols.")
    assert isinstance(SCALE, int)
    for fn in (mul, div, exp2, log2, pow, sqrt, gm):
        assert callable(fn)
    assert hasattr(FixedNumber, "__name__")


def test_top_level_reexports_core():
    import fixed18
    from fixed18 import core

    _banner("SANITY: top-level surface")
    for name in core.__all__:
        assert getattr(fixed18, name) is getattr(core, name), name
    print("[DEBUG] version:", fixed18.__version__)


# Stage 2: constants baseline tests
def test_sanity_constants_alignment():
    """Check the published constants match the 256-bit, 18-decimal domain."""
    from fixed18.core import SCALE, HALF_SCALE, MAX, MIN, MAX_WHOLE, MIN_WHOLE, E, PI, e, pi, scale

    _banner("SANITY: constants baseline")
    print(f"[DEBUG] SCALE={SCALE}, HALF_SCALE={HALF_SCALE}")
    print(f"[DEBUG] MAX={MAX}\n[DEBUG] MAX_WHOLE={MAX_WHOLE}")

    assert SCALE == 10 ** 18
    assert HALF_SCALE == SCALE // 2
    assert MAX == 2 ** 255 - 1
    assert MIN == -(2 ** 255)
    assert MAX_WHOLE == 57896044618658097711785492504343953926634992332820282019728_000000000000000000
    assert MIN_WHOLE == -MAX_WHOLE
    assert MAX_WHOLE % SCALE == 0 and MAX - MAX_WHOLE < SCALE
    assert e() == E == 2_718281828459045235
    assert pi() == PI == 3_141592653589793238
    assert scale() == SCALE


def test_exception_hierarchy_matches_builtins():
    import builtins
    from fixed18.core import FixedPointError, OverflowError, DomainError, DivisionByZeroError

    _banner("SANITY: exception taxonomy")
    assert issubclass(OverflowError, FixedPointError)
    assert issubclass(OverflowError, builtins.OverflowError)
    assert issubclass(DomainError, ValueError)
    assert issubclass(DivisionByZeroError, ZeroDivisionError)


def test_package_metadata_has_no_design_readme():
    from pathlib import Path
    import pytest

    tomllib = pytest.importorskip("tomllib")
    path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with path.open("rb") as fh:
        project = tomllib.load(fh)["project"]
    assert project["name"] == "fixed18"
    assert project.get("readme") != "DESIGN.md"
    assert project["dependencies"] == []
