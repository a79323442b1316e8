"""
Real and LogGammaFunctions capabilities
---------------------------------------
Real refines ElementaryFunctions with the primitive floating-point members
(nan, trunc, copysign) and the real-only functions atan2 and hypot.

LogGammaFunctions refines Real and is optional: a binding conforms to it only
where a native log-gamma routine exists. sign_gamma has a single default
implementation here, written purely in terms of trunc and comparisons, and is
inherited by every conforming binding:

  1. x >= 0                      → PLUS
  2. t = trunc(x); x == t        → PLUS   (poles, and -inf)
  3. t / 2 == trunc(t / 2)       → MINUS  (Γ < 0 on (-2k-1, -2k))
  4. otherwise                   → PLUS
"""

from __future__ import annotations
from typing import Protocol, runtime_checkable

from realmath.capabilities.elementary import ElementaryFunctions, Scalar
from realmath.capabilities.sign import FloatingPointSign


@runtime_checkable
class FloatingPoint(Protocol[Scalar]):
	@classmethod
	def nan(cls) -> Scalar: ...

	@classmethod
	def trunc(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def copysign(cls, magnitude: Scalar, sign: Scalar) -> Scalar: ...


@runtime_checkable
class Real(ElementaryFunctions[Scalar], FloatingPoint[Scalar], Protocol[Scalar]):
	@classmethod
	def atan2(cls, y: Scalar, x: Scalar) -> Scalar:
		"""Angle of (x, y) from the positive real axis, in [-pi, pi]."""
		...

	@classmethod
	def hypot(cls, x: Scalar, y: Scalar) -> Scalar: ...


@runtime_checkable
class LogGammaFunctions(Real[Scalar], Protocol[Scalar]):
	@classmethod
	def log_gamma(cls, x: Scalar) -> Scalar:
		"""log(|gamma(x)|) without the overflow of log(gamma(x)); the sign is dropped."""
		...

	@classmethod
	def sign_gamma(cls, x: Scalar) -> FloatingPointSign:
		"""
		Sign of gamma(x). Poles and -inf report PLUS by convention.
		"""
		if x >= 0:
			return FloatingPointSign.PLUS
		t = cls.trunc(x)
		if x == t:
			return FloatingPointSign.PLUS
		half = t / 2
		if half == cls.trunc(half):
			return FloatingPointSign.MINUS
		return FloatingPointSign.PLUS
