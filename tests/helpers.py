from __future__ import annotations
import numpy as np

from realmath.widths import FloatWidth


def same_value(a, b) -> bool:
	"""Same type, same value and same sign bit; NaN matches NaN."""
	if type(a) is not type(b):
		return False
	if np.isnan(a) and np.isnan(b):
		return True
	return bool(a == b) and bool(np.signbit(a) == np.signbit(b))


def special_values(width: FloatWidth) -> list:
	cast = width.cast
	tiny = np.nextafter(cast(0), cast(1))
	return [
		cast(0.0), cast(-0.0), cast(1.0), cast(-1.0), cast(0.5), cast(-0.5),
		cast(2.0), cast(10.0), tiny, -tiny,
		cast(np.inf), cast(-np.inf), cast(np.nan),
	]


def eps(width: FloatWidth) -> float:
	return float(np.finfo(width.scalar_type).eps)


def close(value, expected: float, width: FloatWidth, k: float = 8.0) -> bool:
	"""Relative closeness within k ulps of the width (never tighter than float64)."""
	tol = k * max(eps(width), float(np.finfo(np.float64).eps)) * max(1.0, abs(expected))
	return abs(float(value) - expected) <= tol
