"""
Capability protocols (production package)

Public API re-export:
	ElementaryFunctions: catalog functions, pow, pow_int, root
	FloatingPoint: nan, trunc, copysign
	Real: ElementaryFunctions + FloatingPoint + atan2, hypot
	LogGammaFunctions: log_gamma and the default sign_gamma (optional)
	FloatingPointSign: PLUS / MINUS
"""

from .elementary import ELEMENTARY_CATALOG, ElementaryFunctions, Scalar
from .real import FloatingPoint, LogGammaFunctions, Real
from .sign import FloatingPointSign

__all__ = [
	"ELEMENTARY_CATALOG", "ElementaryFunctions", "Scalar",
	"FloatingPoint", "Real", "LogGammaFunctions", "FloatingPointSign",
]
