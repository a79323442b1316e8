from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import numpy as np
import sympy as sp

from realmath.accuracy.reference import REFERENCE, evaluate, exact
from realmath.capabilities import LogGammaFunctions
from realmath.widths import FloatWidth


Interval = Tuple[float, float]

# Sampling interval per argument, kept inside every width's finite range.
DOMAINS: Dict[str, Tuple[Interval, ...]] = {
	"exp": ((-10.0, 10.0),),
	"expm1": ((-1.0, 1.0),),
	"exp2": ((-10.0, 10.0),),
	"log": ((1e-3, 100.0),),
	"log1p": ((-0.5, 10.0),),
	"log2": ((1e-3, 100.0),),
	"log10": ((1e-3, 100.0),),
	"sqrt": ((0.0, 100.0),),
	"sin": ((-4.0, 4.0),),
	"cos": ((-4.0, 4.0),),
	"tan": ((-1.5, 1.5),),
	"asin": ((-1.0, 1.0),),
	"acos": ((-1.0, 1.0),),
	"atan": ((-10.0, 10.0),),
	"sinh": ((-5.0, 5.0),),
	"cosh": ((-5.0, 5.0),),
	"tanh": ((-3.0, 3.0),),
	"asinh": ((-10.0, 10.0),),
	"acosh": ((1.0, 10.0),),
	"atanh": ((-0.99, 0.99),),
	"pow": ((0.1, 10.0), (-4.0, 4.0)),
	"atan2": ((-2.0, 2.0), (-2.0, 2.0)),
	"hypot": ((-10.0, 10.0), (-10.0, 10.0)),
	"log_gamma": ((-4.5, 20.0),),
}


@dataclass(frozen=True)
class ProbeResult:
	"""
	Error summary for one function at one width.

	Fields
	------
	function     : binding member name
	width        : width name
	samples      : number of inputs with a finite reference
	max_ulp      : largest error in ulps
	mean_ulp     : mean error in ulps
	worst_input  : arguments of the largest error (as float)
	"""
	function: str
	width: str
	samples: int
	max_ulp: float
	mean_ulp: float
	worst_input: Tuple[float, ...]


class UlpProbe:
	"""
	Deterministic ULP-error probe of bindings against the SymPy reference.

	Inputs are drawn from a seeded PCG64 stream over DOMAINS and rounded to the
	width under test, so every width sees the same nominal grid.
	"""

	def __init__(self, n: int = 64, seed: int = 1729, digits: int = 40) -> None:
		self.n = int(n)
		self.seed = int(seed)
		self.digits = int(digits)

	@staticmethod
	def functions(binding: type) -> Tuple[str, ...]:
		"""Names the probe can check on `binding` (log_gamma only where bound)."""
		names = []
		for name in DOMAINS:
			if name == "log_gamma" and not isinstance(binding, LogGammaFunctions):
				continue
			names.append(name)
		return tuple(names)

	def sample(self, width: FloatWidth, name: str) -> List[tuple]:
		"""Return `n` argument tuples for `name`, cast to `width`."""
		rng = np.random.default_rng(self.seed)
		columns = []
		for lo, hi in DOMAINS[name]:
			columns.append(rng.uniform(lo, hi, size=self.n))
		out: List[tuple] = []
		for i in range(self.n):
			out.append(tuple(width.cast(c[i]) for c in columns))
		return out

	@staticmethod
	def ulp_error(width: FloatWidth, value, reference: sp.Float) -> Optional[float]:
		"""
		|value - reference| in units of the width's spacing at the reference.
		None when the reference is not representable (overflow) or value is
		not finite.
		"""
		if not np.isfinite(value):
			return None
		with np.errstate(all="ignore"):
			nearest = width.cast(float(reference))
		if not np.isfinite(nearest):
			return None
		spacing = abs(np.spacing(abs(nearest)))
		err = abs(exact(value) - reference) / exact(spacing)
		return float(err)

	def run(self, binding: type, name: str) -> ProbeResult:
		width = binding.width
		fn = getattr(binding, name)
		errors: List[float] = []
		worst: Tuple[float, ...] = ()
		for args in self.sample(width, name):
			ref = evaluate(name, *args, digits=self.digits)
			if ref is None:
				continue
			e = self.ulp_error(width, fn(*args), ref)
			if e is None:
				continue
			if not errors or e > max(errors):
				worst = tuple(float(a) for a in args)
			errors.append(e)
		if errors:
			max_ulp = float(max(errors))
			mean_ulp = float(np.mean(errors))
		else:
			max_ulp = 0.0
			mean_ulp = 0.0
		return ProbeResult(name, width.name, len(errors), max_ulp, mean_ulp, worst)

	def run_all(self, bindings: Iterable[type], names: Optional[Sequence[str]] = None) -> List[ProbeResult]:
		"""Probe every binding over `names` (default: all it supports)."""
		results: List[ProbeResult] = []
		for binding in bindings:
			available = self.functions(binding)
			if names is None:
				wanted = available
			else:
				wanted = tuple(n for n in names if n in available)
			for name in wanted:
				results.append(self.run(binding, name))
		return results


def known_functions() -> Tuple[str, ...]:
	return tuple(n for n in DOMAINS if n in REFERENCE)
