"""
ElementaryFunctions capability
------------------------------
Type-level contract for the elementary functions of one scalar type. It is a
typing.Protocol of classmethods, so a concrete width is described by a class
(see realmath.bindings) and generic code only ever talks to the protocol.

Catalog (one argument, T -> T):
  exp, expm1, exp2, log, log1p, log2, log10, sqrt,
  sin, cos, tan, asin, acos, atan,
  sinh, cosh, tanh, asinh, acosh, atanh

Powers and roots:
  • pow(x, y)      exp(y * log(x)) without intermediate rounding; NaN for x < 0
                   whether or not y is integral (a generic algorithm cannot tell
                   the real and complex branch cut apart cheaply)
  • pow_int(x, n)  integer exponent; n is converted to T first, so results for
                   |n| > 2**significand_bits carry that conversion's rounding
  • root(x, n)     real n-th root; NaN for x < 0 with even n, otherwise the sign
                   of x on the magnitude pow(|x|, 1/n)
"""

from __future__ import annotations
from typing import Protocol, Tuple, TypeVar, runtime_checkable
import numpy as np


Scalar = TypeVar("Scalar", bound=np.floating)

ELEMENTARY_CATALOG: Tuple[str, ...] = (
	"exp", "expm1", "exp2", "log", "log1p", "log2", "log10", "sqrt",
	"sin", "cos", "tan", "asin", "acos", "atan",
	"sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
)


@runtime_checkable
class ElementaryFunctions(Protocol[Scalar]):
	@classmethod
	def exp(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def expm1(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def exp2(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def log(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def log1p(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def log2(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def log10(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def sqrt(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def sin(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def cos(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def tan(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def asin(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def acos(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def atan(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def sinh(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def cosh(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def tanh(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def asinh(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def acosh(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def atanh(cls, x: Scalar) -> Scalar: ...

	@classmethod
	def pow(cls, x: Scalar, y: Scalar) -> Scalar: ...

	@classmethod
	def pow_int(cls, x: Scalar, n: int) -> Scalar: ...

	@classmethod
	def root(cls, x: Scalar, n: int) -> Scalar: ...
