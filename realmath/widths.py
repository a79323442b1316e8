"""
Floating-point widths
---------------------
Closed enumeration of the concrete binary floating-point formats a binding can
be built for:

  • FLOAT16  IEEE 754 binary16              (np.float16)
  • FLOAT32  IEEE 754 binary32              (np.float32)
  • FLOAT64  IEEE 754 binary64              (np.float64)
  • FLOAT80  x87 80-bit extended precision  (np.longdouble, x86 only)

A descriptor is identified by its layout (significand and exponent bits), not
by the NumPy type alone: np.longdouble is a plain binary64 on some platforms
and binary128 on others, and only the x87 layout is FLOAT80.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from realmath.errors import UnsupportedWidthError


@dataclass(frozen=True)
class FloatWidth:
	"""Immutable descriptor of one floating-point representation."""
	name: str
	bits: int
	scalar_type: type
	significand_bits: int
	exponent_bits: int

	@property
	def dtype(self) -> np.dtype:
		return np.dtype(self.scalar_type)

	@property
	def char(self) -> str:
		"""NumPy type character used in ufunc loop signatures (e, f, d, g)."""
		return self.dtype.char

	@property
	def binding_name(self) -> str:
		return f"Float{self.bits}"

	def is_native(self) -> bool:
		"""
		Return True when NumPy's scalar type has exactly this layout on the
		running machine.
		"""
		fi = np.finfo(self.scalar_type)
		return int(fi.nmant) == self.significand_bits and int(fi.nexp) == self.exponent_bits

	def cast(self, x):
		"""Convert `x` to a scalar of this width."""
		return self.scalar_type(x)

	def nan(self):
		return self.scalar_type(np.nan)

	def __str__(self) -> str:
		return self.name


FLOAT16 = FloatWidth("float16", 16, np.float16, 10, 5)
FLOAT32 = FloatWidth("float32", 32, np.float32, 23, 8)
FLOAT64 = FloatWidth("float64", 64, np.float64, 52, 11)
FLOAT80 = FloatWidth("float80", 80, np.longdouble, 63, 15)

WIDTHS: Tuple[FloatWidth, ...] = (FLOAT16, FLOAT32, FLOAT64, FLOAT80)


def width_named(name: str) -> FloatWidth:
	"""Return the descriptor called `name`; raise ValueError for unknown names."""
	key = name.strip().lower()
	for w in WIDTHS:
		if w.name == key:
			return w
	known = ", ".join(w.name for w in WIDTHS)
	raise ValueError(f"unknown floating-point width {name!r} (known: {known})")


def width_of(value) -> FloatWidth:
	"""
	Resolve the width of a scalar, 0-d or 1-d array value.

	Python floats and ints resolve to FLOAT64. Anything else that is not a
	NumPy float of a native layout raises UnsupportedWidthError.
	"""
	if isinstance(value, bool):
		raise UnsupportedWidthError("bool is not a floating-point value")
	if isinstance(value, (np.floating, np.ndarray)):
		char = value.dtype.char
		for w in WIDTHS:
			if w.char == char and w.is_native():
				return w
		raise UnsupportedWidthError(f"no floating-point width matches dtype {value.dtype}")
	if isinstance(value, (float, int, np.integer)):
		return FLOAT64
	raise UnsupportedWidthError(f"unsupported operand type: {type(value).__name__}")
