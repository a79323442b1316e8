import warnings

import numpy as np
import pytest

import realmath.bindings as bindings_module
from realmath.bindings import BINDINGS, build_binding, build_bindings, binding_for
from realmath.capabilities import ELEMENTARY_CATALOG, ElementaryFunctions, LogGammaFunctions, Real
from realmath.config import PlatformConfig
from realmath.errors import UnsupportedWidthError
from realmath.native import NATIVE_UFUNCS
from realmath.widths import FLOAT16, FLOAT32, FLOAT64, FLOAT80

from helpers import same_value, special_values


def test_float32_and_float64_are_always_bound():
	assert FLOAT32 in BINDINGS
	assert FLOAT64 in BINDINGS
	from realmath.bindings import Float32, Float64
	assert Float32 is BINDINGS[FLOAT32]
	assert Float64 is BINDINGS[FLOAT64]


def test_float80_only_where_native():
	if FLOAT80.is_native():
		assert FLOAT80 in BINDINGS
		assert bindings_module.Float80.width is FLOAT80
	else:
		assert FLOAT80 not in BINDINGS
		with pytest.raises(AttributeError):
			bindings_module.Float80


def test_unknown_binding_attribute():
	with pytest.raises(AttributeError):
		bindings_module.Float128


def test_binding_class_shape(binding):
	assert binding.__name__ == binding.width.binding_name
	assert binding.__module__ == "realmath.bindings"
	assert isinstance(binding, ElementaryFunctions)
	assert isinstance(binding, Real)
	assert isinstance(binding, LogGammaFunctions) == binding.native.has("lgamma")


@pytest.mark.parametrize("name", ELEMENTARY_CATALOG)
def test_catalog_matches_native(binding, name):
	fn = getattr(binding, name)
	ufunc = NATIVE_UFUNCS[name]
	for x in special_values(binding.width):
		with np.errstate(all="ignore"):
			expected = ufunc(x)
		got = fn(x)
		assert same_value(got, expected), (name, x, got, expected)


def test_catalog_accepts_python_numbers(binding):
	got = binding.sqrt(4)
	assert type(got) is binding.width.scalar_type
	assert got == 2


def test_primitive_members(binding):
	w = binding.width
	assert np.isnan(binding.nan())
	assert type(binding.nan()) is w.scalar_type
	assert binding.trunc(w.cast(-2.5)) == -2
	assert binding.trunc(w.cast(2.5)) == 2
	neg = binding.copysign(w.cast(3.0), w.cast(-0.0))
	assert neg == -3


def test_catalog_raises_no_warnings(binding):
	w = binding.width
	with np.errstate(all="raise"):
		assert np.isnan(binding.log(w.cast(-1.0)))
		assert binding.log(w.cast(0.0)) == -np.inf
		assert binding.exp(1e5) == np.inf


@pytest.mark.parametrize("width, big", [(FLOAT16, 1e5), (FLOAT32, 1e40)])
def test_pow_and_root_overflowing_base_is_silent(width, big):
	cls = binding_for(width)
	with warnings.catch_warnings(), np.errstate(all="raise"):
		warnings.simplefilter("error")
		assert cls.pow(big, 2.0) == np.inf
		assert np.isnan(cls.pow(-big, 0.5))
		assert cls.root(big, 3) == np.inf
		assert cls.root(-big, 3) == -np.inf
		assert np.isnan(cls.root(-big, 2))


def test_without_log_gamma():
	cls = build_binding(FLOAT64, log_gamma=False)
	assert not hasattr(cls, "log_gamma")
	assert not hasattr(cls, "sign_gamma")
	assert not isinstance(cls, LogGammaFunctions)
	assert isinstance(cls, Real)


def test_float64_has_log_gamma():
	assert isinstance(build_binding(FLOAT64), LogGammaFunctions)


def test_build_bindings_follows_config():
	table = build_bindings(PlatformConfig(widths=(FLOAT16, FLOAT32), log_gamma=False))
	assert list(table) == [FLOAT16, FLOAT32]
	for cls in table.values():
		assert not isinstance(cls, LogGammaFunctions)


def test_binding_for_width_and_value():
	assert binding_for(FLOAT64) is BINDINGS[FLOAT64]
	assert binding_for(np.float32(1.0)) is BINDINGS[FLOAT32]
	assert binding_for(1.0) is BINDINGS[FLOAT64]


def test_binding_for_unbound_width(monkeypatch):
	monkeypatch.delitem(BINDINGS, FLOAT32)
	with pytest.raises(UnsupportedWidthError):
		binding_for(np.float32(1.0))
