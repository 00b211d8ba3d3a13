# Top-level API for fixed18 (integer-domain).
"""
Top-level API for fixed18.

Signed 256-bit fixed-point arithmetic with 18 decimals: deterministic,
integer-only, bit-exact across runs. Everything public lives in
`fixed18.core` and is re-exported here.
"""

from __future__ import annotations

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all

__version__ = "0.1.0"

__all__ = list(_core_all) + ["__version__"]
