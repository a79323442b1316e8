"""
Top-level re-exports: the width descriptors, the capability protocols, the
platform's bindings and the free-function layer.

	>>> import numpy as np
	>>> import realmath as rm
	>>> rm.root(np.float32(-8.0), 3)
	>>> rm.sign_gamma(-0.5)
"""

from .errors import CapabilityUnavailableError, UnsupportedWidthError
from .widths import FLOAT16, FLOAT32, FLOAT64, FLOAT80, WIDTHS, FloatWidth, width_named, width_of
from .config import PlatformConfig
from .capabilities import (
	ElementaryFunctions, FloatingPoint, FloatingPointSign, LogGammaFunctions, Real,
)
from .bindings import BINDINGS, binding_for
from .vector import Vector
from .functions import (
	exp, expm1, exp2, log, log1p, log2, log10, sqrt,
	sin, cos, tan, asin, acos, atan,
	sinh, cosh, tanh, asinh, acosh, atanh,
	atan2, hypot, pow, root, log_gamma, sign_gamma,
)

__all__ = [
	"CapabilityUnavailableError", "UnsupportedWidthError",
	"FLOAT16", "FLOAT32", "FLOAT64", "FLOAT80", "WIDTHS", "FloatWidth", "width_named", "width_of",
	"PlatformConfig",
	"ElementaryFunctions", "FloatingPoint", "FloatingPointSign", "LogGammaFunctions", "Real",
	"BINDINGS", "binding_for", "Vector",
	"exp", "expm1", "exp2", "log", "log1p", "log2", "log10", "sqrt",
	"sin", "cos", "tan", "asin", "acos", "atan",
	"sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
	"atan2", "hypot", "pow", "root", "log_gamma", "sign_gamma",
]
