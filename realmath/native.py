"""
Native routine tables
---------------------
This module provides NativeRoutines, the width-matched view of the native math
library a binding delegates to. The library itself is NumPy's ufunc loops,
plus SciPy's gammaln for log-gamma.

A routine is bound for a width only when its ufunc carries the exact loop for
that width's type character ('f->f', 'dd->d', ...). Routines whose only loop
for a width goes through promotion to a wider type are treated as absent, the
same way a C library simply lacks e.g. lgammal on some systems.

Design notes
------------
• Lookup of an unbound routine raises AttributeError, naming the width.
• Calls run under np.errstate(all="ignore"): NaN and ±inf are the results,
  no floating-point warnings are emitted.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple, Any

import numpy as np
from scipy import special

from realmath.widths import FloatWidth


NATIVE_UFUNCS: Dict[str, np.ufunc] = {
	"exp": np.exp,
	"expm1": np.expm1,
	"exp2": np.exp2,
	"log": np.log,
	"log1p": np.log1p,
	"log2": np.log2,
	"log10": np.log10,
	"sqrt": np.sqrt,
	"sin": np.sin,
	"cos": np.cos,
	"tan": np.tan,
	"asin": np.arcsin,
	"acos": np.arccos,
	"atan": np.arctan,
	"sinh": np.sinh,
	"cosh": np.cosh,
	"tanh": np.tanh,
	"asinh": np.arcsinh,
	"acosh": np.arccosh,
	"atanh": np.arctanh,
	"pow": np.power,
	"atan2": np.arctan2,
	"hypot": np.hypot,
	"trunc": np.trunc,
	"copysign": np.copysign,
	"lgamma": special.gammaln,
}

# Routines every binding needs; a width missing any of them cannot be bound.
REQUIRED_ROUTINES: Tuple[str, ...] = tuple(n for n in NATIVE_UFUNCS if n != "lgamma")


def loop_signature(ufunc: np.ufunc, char: str) -> str:
	"""Return the exact-width loop signature of `ufunc` for type character `char`."""
	return char * ufunc.nin + "->" + char * ufunc.nout


def has_exact_loop(ufunc: np.ufunc, char: str) -> bool:
	return loop_signature(ufunc, char) in ufunc.types


class NativeRoutines:
	"""
	Routines of the native library that exist at one exact width.

	Instances are immutable after construction and hold only the probed ufuncs.
	"""

	__slots__ = ("width", "_bound")

	def __init__(self, width: FloatWidth, exclude: Iterable[str] = ()) -> None:
		"""
		Probe every known routine for `width`; names in `exclude` are left
		unbound even when the native loop exists.
		"""
		skip = set(exclude)
		bound: Dict[str, np.ufunc] = {}
		for name, ufunc in NATIVE_UFUNCS.items():
			if name in skip:
				continue
			if has_exact_loop(ufunc, width.char):
				bound[name] = ufunc
		self.width = width
		self._bound = bound

	def names(self) -> Tuple[str, ...]:
		return tuple(self._bound.keys())

	def has(self, name: str) -> bool:
		return name in self._bound

	def missing(self, names: Iterable[str]) -> Tuple[str, ...]:
		"""Return the subset of `names` with no native routine at this width."""
		return tuple(n for n in names if n not in self._bound)

	def get(self, name: str) -> np.ufunc:
		if name in self._bound:
			return self._bound[name]
		raise AttributeError(f"no native {name} routine for {self.width.name}")

	def call(self, name: str, *args: Any):
		"""Cast `args` to the width, run the native routine, return a scalar of the width."""
		fn = self.get(name)
		cast = self.width.cast
		with np.errstate(all="ignore"):
			operands = tuple(cast(a) for a in args)
			return cast(fn(*operands))

	def __repr__(self) -> str:
		return f"NativeRoutines({self.width.name}: {', '.join(self.names())})"
