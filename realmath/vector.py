"""
Fixed-size vectors
------------------
Vector is an immutable aggregate of N lanes of one floating-point width. Its
length is fixed at construction and no operation couples lanes: the dispatch
layer maps every lane through the scalar resolution independently.

One-dimensional NumPy arrays of a supported float dtype are accepted by the
dispatch layer as vectors too; Vector is the value-typed counterpart.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple
import numpy as np

from realmath.widths import FLOAT64, FloatWidth, width_of


@dataclass(frozen=True)
class Vector:
	"""Immutable vector of `width` scalars."""
	lanes: Tuple[np.floating, ...]
	width: FloatWidth

	def __post_init__(self) -> None:
		lanes = tuple(self.lanes)
		for lane in lanes:
			if not isinstance(lane, self.width.scalar_type):
				raise TypeError(f"lane {lane!r} is not a {self.width.name} scalar")
		object.__setattr__(self, "lanes", lanes)

	@staticmethod
	def of(values: Iterable, width: Optional[FloatWidth] = None) -> "Vector":
		"""
		Build a vector from any iterable of numbers. Without an explicit
		`width`, the first NumPy float lane decides it; plain Python numbers
		give FLOAT64.
		"""
		items = list(values)
		if width is None:
			width = FLOAT64
			for v in items:
				if isinstance(v, np.floating):
					width = width_of(v)
					break
		with np.errstate(all="ignore"):
			lanes = tuple(width.cast(v) for v in items)
		return Vector(lanes, width)

	@staticmethod
	def from_array(a: np.ndarray) -> "Vector":
		a = np.asarray(a)
		if a.ndim != 1:
			raise ValueError(f"vectors are one-dimensional, got shape {a.shape}")
		width = width_of(a)
		return Vector(tuple(width.cast(v) for v in a), width)

	def to_array(self) -> np.ndarray:
		return np.array(self.lanes, dtype=self.width.dtype)

	def __len__(self) -> int:
		return len(self.lanes)

	def __getitem__(self, i: int):
		return self.lanes[i]

	def __iter__(self) -> Iterator:
		return iter(self.lanes)
