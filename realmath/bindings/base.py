"""
Concrete binding policy (shared by every width)
-----------------------------------------------
FloatBinding implements the Real capability once, parameterized by two class
attributes injected per width by the factory:

  • width   the FloatWidth descriptor
  • native  the NativeRoutines table for that width

Catalog functions forward straight to the native routine. The domain-sensitive
operations add their guard and delegate the arithmetic to the same table:

  • pow(x, y)      x >= 0 else NaN, then native pow
  • pow_int(x, n)  n converted to the width, then native pow
  • root(x, n)     x < 0 with even n is NaN, else copysign(pow(|x|, 1/n), x)
  • atan2, hypot   native two-argument routines

LogGammaBinding is mixed in only for widths with a native log-gamma routine;
it brings log_gamma and, through LogGammaFunctions, the default sign_gamma.

All operations are classmethods; the classes are never instantiated.
"""

from __future__ import annotations
from typing import ClassVar
import operator
import numpy as np

from realmath.capabilities import LogGammaFunctions, Real
from realmath.native import NativeRoutines
from realmath.widths import FloatWidth


class FloatBinding(Real):
	"""Real capability for one width; see the module docstring."""

	width: ClassVar[FloatWidth]
	native: ClassVar[NativeRoutines]

	@classmethod
	def cast(cls, x):
		return cls.width.cast(x)

	# Primitive floating-point members

	@classmethod
	def nan(cls):
		return cls.width.nan()

	@classmethod
	def trunc(cls, x):
		"""Round toward zero."""
		return cls.native.call("trunc", x)

	@classmethod
	def copysign(cls, magnitude, sign):
		return cls.native.call("copysign", magnitude, sign)

	# Catalog

	@classmethod
	def exp(cls, x):
		"""Exponential, e**x."""
		return cls.native.call("exp", x)

	@classmethod
	def expm1(cls, x):
		"""e**x - 1, accurate near zero."""
		return cls.native.call("expm1", x)

	@classmethod
	def exp2(cls, x):
		"""2**x."""
		return cls.native.call("exp2", x)

	@classmethod
	def log(cls, x):
		"""Natural logarithm."""
		return cls.native.call("log", x)

	@classmethod
	def log1p(cls, x):
		"""log(1 + x), accurate near zero."""
		return cls.native.call("log1p", x)

	@classmethod
	def log2(cls, x):
		"""Base-2 logarithm."""
		return cls.native.call("log2", x)

	@classmethod
	def log10(cls, x):
		"""Base-10 logarithm."""
		return cls.native.call("log10", x)

	@classmethod
	def sqrt(cls, x):
		"""Square root."""
		return cls.native.call("sqrt", x)

	@classmethod
	def sin(cls, x):
		"""Sine."""
		return cls.native.call("sin", x)

	@classmethod
	def cos(cls, x):
		"""Cosine."""
		return cls.native.call("cos", x)

	@classmethod
	def tan(cls, x):
		"""Tangent."""
		return cls.native.call("tan", x)

	@classmethod
	def asin(cls, x):
		"""Inverse sine."""
		return cls.native.call("asin", x)

	@classmethod
	def acos(cls, x):
		"""Inverse cosine."""
		return cls.native.call("acos", x)

	@classmethod
	def atan(cls, x):
		"""Inverse tangent."""
		return cls.native.call("atan", x)

	@classmethod
	def sinh(cls, x):
		"""Hyperbolic sine."""
		return cls.native.call("sinh", x)

	@classmethod
	def cosh(cls, x):
		"""Hyperbolic cosine."""
		return cls.native.call("cosh", x)

	@classmethod
	def tanh(cls, x):
		"""Hyperbolic tangent."""
		return cls.native.call("tanh", x)

	@classmethod
	def asinh(cls, x):
		"""Inverse hyperbolic sine."""
		return cls.native.call("asinh", x)

	@classmethod
	def acosh(cls, x):
		"""Inverse hyperbolic cosine."""
		return cls.native.call("acosh", x)

	@classmethod
	def atanh(cls, x):
		"""Inverse hyperbolic tangent."""
		return cls.native.call("atanh", x)

	# Powers and roots

	@classmethod
	def pow(cls, x, y):
		"""
		Real power. Negative (and NaN) bases give NaN even for integral y.
		"""
		with np.errstate(all="ignore"):
			x = cls.cast(x)
		if not x >= 0:
			return cls.nan()
		return cls.native.call("pow", x, y)

	@classmethod
	def pow_int(cls, x, n):
		"""
		Integer power through the native real power routine.

		The exponent is converted to the width before the call, so it is only
		exact while |n| <= 2**significand_bits; larger exponents are rounded to
		the nearest representable value. n must fit a signed 64-bit integer.
		"""
		exponent = np.int64(operator.index(n))
		with np.errstate(all="ignore"):
			y = cls.cast(exponent)
		return cls.native.call("pow", x, y)

	@classmethod
	def root(cls, x, n):
		"""Real n-th root; NaN for negative x with even n."""
		n = operator.index(n)
		with np.errstate(all="ignore"):
			x = cls.cast(x)
		if x < 0 and n % 2 == 0:
			return cls.nan()
		with np.errstate(all="ignore"):
			inverse = cls.cast(1) / cls.cast(n)
		magnitude = cls.native.call("pow", abs(x), inverse)
		return cls.copysign(magnitude, x)

	# Real-only

	@classmethod
	def atan2(cls, y, x):
		return cls.native.call("atan2", y, x)

	@classmethod
	def hypot(cls, x, y):
		return cls.native.call("hypot", x, y)


class LogGammaBinding(LogGammaFunctions):
	"""Native log-gamma member; sign_gamma comes from LogGammaFunctions."""

	native: ClassVar[NativeRoutines]

	@classmethod
	def log_gamma(cls, x):
		return cls.native.call("lgamma", x)
