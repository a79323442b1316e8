"""
Exceptions raised for misuse of the API.

Domain violations (negative base in pow, even root of a negative number, ...)
never raise: they return NaN. The types below only cover arguments the library
cannot route to a binding at all.
"""

from __future__ import annotations


class UnsupportedWidthError(TypeError):
	"""The value's floating-point format has no binding on this platform."""


class CapabilityUnavailableError(TypeError):
	"""The binding for this width does not conform to the requested capability."""
