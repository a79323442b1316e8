"""
Free-function dispatch layer
----------------------------
Every capability operation is mirrored as a free function with the same
arguments, resolved at call time in two ways:

  • Scalar resolution: the width is read off the NumPy-typed arguments (Python
    numbers adopt it, and resolve to float64 on their own) and the call is
    forwarded to that width's binding classmethod.
  • Vector resolution: for a Vector or a 1-D NumPy array, a result of the same
    kind and length is built lane by lane, each lane going through the scalar
    resolution independently and completely. Two-argument functions pair lane
    i with lane i.

Usage
-----
	>>> import numpy as np
	>>> from realmath import sin, pow, Vector
	>>> sin(np.float32(0.5))
	>>> pow(Vector.of([1.0, 4.0]), 2)

pow(x, n) with an int/np.integer exponent resolves to the binding's pow_int;
any other exponent resolves to the real pow (NaN for negative x).
"""

from __future__ import annotations
from typing import Any, Callable, List
import operator
import numpy as np

from realmath.bindings import binding_for
from realmath.capabilities import LogGammaFunctions
from realmath.errors import CapabilityUnavailableError
from realmath.vector import Vector
from realmath.widths import FloatWidth, width_of


LaneFn = Callable[..., Any]


def _is_vector(value) -> bool:
	if isinstance(value, Vector):
		return True
	if isinstance(value, np.ndarray):
		if value.ndim == 1:
			width_of(value)
			return True
		if value.ndim > 1:
			raise ValueError(f"vectors are one-dimensional, got shape {value.shape}")
	return False


def _is_integral(value) -> bool:
	return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _scalar(value):
	"""Unwrap 0-d arrays to their scalar."""
	if isinstance(value, np.ndarray):
		return value[()]
	return value


def _common_width(*values) -> FloatWidth:
	"""
	Width shared by the NumPy-typed operands; plain Python numbers adopt it.
	Two different NumPy widths raise TypeError.
	"""
	found = None
	for v in values:
		if isinstance(v, np.floating):
			w = width_of(v)
			if found is not None and w != found:
				raise TypeError(f"mixed floating-point widths: {found.name} and {w.name}")
			found = w
	if found is None:
		found = width_of(values[0])
		for v in values[1:]:
			width_of(v)
	return found


def _pack(template, lanes: List[Any]):
	"""Rebuild a vector of the same kind and length as `template`."""
	if isinstance(template, Vector):
		return Vector(tuple(lanes), template.width)
	out = np.empty(len(lanes), dtype=template.dtype)
	for i in range(len(lanes)):
		out[i] = lanes[i]
	return out


def _map_lanes(fn: LaneFn, v):
	lanes = []
	for i in range(len(v)):
		lanes.append(fn(v[i]))
	return lanes


def _zip_lanes(name: str, fn: LaneFn, a, b):
	if len(a) != len(b):
		raise ValueError(f"{name}: vector length mismatch: {len(a)} != {len(b)}")
	lanes = []
	for i in range(len(a)):
		lanes.append(fn(a[i], b[i]))
	return lanes


def _unary(name: str, x):
	if _is_vector(x):
		return _pack(x, _map_lanes(lambda lane: _unary(name, lane), x))
	x = _scalar(x)
	binding = binding_for(_common_width(x))
	return getattr(binding, name)(x)


def _binary(name: str, a, b):
	va = _is_vector(a)
	vb = _is_vector(b)
	if va and vb:
		return _pack(a, _zip_lanes(name, lambda p, q: _binary(name, p, q), a, b))
	if va or vb:
		raise TypeError(f"{name}: expected two vectors or two scalars")
	a = _scalar(a)
	b = _scalar(b)
	binding = binding_for(_common_width(a, b))
	return getattr(binding, name)(a, b)


def _with_int(name: str, x, n):
	"""Operations taking a scalar/vector and one integer applied to every lane."""
	n = operator.index(n)
	if _is_vector(x):
		return _pack(x, _map_lanes(lambda lane: _with_int(name, lane, n), x))
	x = _scalar(x)
	binding = binding_for(_common_width(x))
	return getattr(binding, name)(x, n)


def _log_gamma_binding(x) -> type:
	binding = binding_for(_common_width(x))
	if not isinstance(binding, LogGammaFunctions):
		raise CapabilityUnavailableError(f"log-gamma is not available for {binding.width.name} on this platform")
	return binding


def exp(x): return _unary("exp", x)
def expm1(x): return _unary("expm1", x)
def exp2(x): return _unary("exp2", x)
def log(x): return _unary("log", x)
def log1p(x): return _unary("log1p", x)
def log2(x): return _unary("log2", x)
def log10(x): return _unary("log10", x)
def sqrt(x): return _unary("sqrt", x)

def sin(x): return _unary("sin", x)
def cos(x): return _unary("cos", x)
def tan(x): return _unary("tan", x)
def asin(x): return _unary("asin", x)
def acos(x): return _unary("acos", x)
def atan(x): return _unary("atan", x)

def sinh(x): return _unary("sinh", x)
def cosh(x): return _unary("cosh", x)
def tanh(x): return _unary("tanh", x)
def asinh(x): return _unary("asinh", x)
def acosh(x): return _unary("acosh", x)
def atanh(x): return _unary("atanh", x)

def atan2(y, x): return _binary("atan2", y, x)
def hypot(x, y): return _binary("hypot", x, y)


def pow(x, y):
	"""
	x raised to y. An integral `y` selects the integer power; otherwise the real
	power, which is NaN for every negative x:

		>>> pow(-1.0, 2.0)   # nan
		>>> pow(-1.0, 2)     # 1.0
	"""
	y = _scalar(y)
	if _is_integral(y):
		return _with_int("pow_int", x, y)
	return _binary("pow", x, y)


def root(x, n):
	"""Real n-th root; NaN for negative x when n is even."""
	return _with_int("root", x, n)


def log_gamma(x):
	"""log(|gamma(x)|). Raises CapabilityUnavailableError where the width has no log-gamma."""
	if _is_vector(x):
		return _pack(x, _map_lanes(log_gamma, x))
	x = _scalar(x)
	return _log_gamma_binding(x).log_gamma(x)


def sign_gamma(x):
	"""Sign of gamma(x); a tuple of signs for a vector argument."""
	if _is_vector(x):
		return tuple(_map_lanes(sign_gamma, x))
	x = _scalar(x)
	binding = _log_gamma_binding(x)
	return binding.sign_gamma(binding.cast(x))


__all__ = [
	"exp", "expm1", "exp2", "log", "log1p", "log2", "log10", "sqrt",
	"sin", "cos", "tan", "asin", "acos", "atan",
	"sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
	"atan2", "hypot", "pow", "root", "log_gamma", "sign_gamma",
]
