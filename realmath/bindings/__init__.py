"""
Concrete scalar bindings (production package)

The platform's binding table is built once at import from
PlatformConfig.from_env(). Bindings are reachable by width or by value through
binding_for(), and by class name as module attributes:

	from realmath.bindings import Float32

A width that is not bound on this platform (Float80 outside x87, or anything
removed through REALMATH_WIDTHS) has no attribute at all.
"""

from __future__ import annotations
from typing import Dict

from realmath.bindings.base import FloatBinding, LogGammaBinding
from realmath.bindings.factory import build_binding, build_bindings
from realmath.config import PlatformConfig
from realmath.errors import UnsupportedWidthError
from realmath.widths import FloatWidth, width_of


BINDINGS: Dict[FloatWidth, type] = build_bindings(PlatformConfig.from_env())


def binding_for(width_or_value) -> type:
	"""
	Return the binding class for a FloatWidth, or for the width of a value.
	Raises UnsupportedWidthError when that width is not bound here.
	"""
	if isinstance(width_or_value, FloatWidth):
		width = width_or_value
	else:
		width = width_of(width_or_value)
	binding = BINDINGS.get(width)
	if binding is None:
		raise UnsupportedWidthError(f"{width.name} is not bound on this platform")
	return binding


def __getattr__(name: str):
	for binding in BINDINGS.values():
		if binding.__name__ == name:
			return binding
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
	"BINDINGS", "FloatBinding", "LogGammaBinding",
	"binding_for", "build_binding", "build_bindings",
]
