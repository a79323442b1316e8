from __future__ import annotations
from enum import Enum


class FloatingPointSign(Enum):
	"""Sign of a floating-point quantity; the result type of sign_gamma."""
	PLUS = 0
	MINUS = 1
