"""
High-precision reference (SymPy)
--------------------------------
Exact-input, many-digit evaluation of every function the bindings expose, used
to measure binding error in units in the last place:

  • inputs are converted exactly: a binary float is a rational p/q
    (as_integer_ratio), so no decimal rounding enters the reference
  • the expression is evaluated with sympy.N at `digits` significant digits
  • non-real or non-finite references (poles, overflow, out-of-domain) are
    reported as None and skipped by the probe

Notes
-----
- expm1 / log1p are built as exp(z) - 1 and log(1 + z); evalf raises the
  working precision on cancellation, so small z stays accurate.
- log_gamma uses loggamma for z > 0 and log|gamma(z)| below zero, where
  loggamma takes the complex branch.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional
import sympy as sp


def _log_gamma(z: sp.Expr) -> sp.Expr:
	if z > 0:
		return sp.loggamma(z)
	return sp.log(sp.Abs(sp.gamma(z)))


REFERENCE: Dict[str, Callable[..., sp.Expr]] = {
	"exp": sp.exp,
	"expm1": lambda z: sp.exp(z) - 1,
	"exp2": lambda z: sp.Integer(2) ** z,
	"log": sp.log,
	"log1p": lambda z: sp.log(1 + z),
	"log2": lambda z: sp.log(z, 2),
	"log10": lambda z: sp.log(z, 10),
	"sqrt": sp.sqrt,
	"sin": sp.sin,
	"cos": sp.cos,
	"tan": sp.tan,
	"asin": sp.asin,
	"acos": sp.acos,
	"atan": sp.atan,
	"sinh": sp.sinh,
	"cosh": sp.cosh,
	"tanh": sp.tanh,
	"asinh": sp.asinh,
	"acosh": sp.acosh,
	"atanh": sp.atanh,
	"pow": lambda x, y: x ** y,
	"atan2": sp.atan2,
	"hypot": lambda x, y: sp.sqrt(x * x + y * y),
	"log_gamma": _log_gamma,
}


def exact(value) -> sp.Rational:
	"""Return the exact rational value of a finite binary float."""
	p, q = value.as_integer_ratio()
	return sp.Rational(p, q)


def evaluate(name: str, *args, digits: int = 40) -> Optional[sp.Float]:
	"""
	Reference value of `name` at the exact `args`, or None when it is not a
	finite real number.
	"""
	fn = REFERENCE[name]
	expr = fn(*(exact(a) for a in args))
	if expr.has(sp.zoo, sp.oo, -sp.oo, sp.nan):
		return None
	v = sp.N(expr, digits)
	if not v.is_real or not v.is_finite:
		return None
	return v
