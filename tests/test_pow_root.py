import numpy as np
import pytest

import realmath as rm
from realmath.widths import FLOAT32, FLOAT64

from helpers import close, same_value, special_values


@pytest.mark.parametrize("y", [2.0, 3.0, 0.5, -1.0, 0.0])
def test_pow_negative_base_is_nan(binding, y):
	w = binding.width
	for x in (-1.0, -2.0, -0.5, -np.inf):
		got = binding.pow(w.cast(x), w.cast(y))
		assert np.isnan(got)
		assert type(got) is w.scalar_type


def test_pow_nan_base_is_nan(binding):
	w = binding.width
	assert np.isnan(binding.pow(w.nan(), w.cast(0.0)))


def test_pow_integral_float_exponent_still_nan(binding):
	assert np.isnan(binding.pow(-1, 2))


def test_pow_matches_native_for_non_negative_base(binding):
	w = binding.width
	bases = [v for v in special_values(w) if v >= 0]
	exponents = [w.cast(e) for e in (0.0, -0.0, 0.5, 1.0, 2.0, -3.0, np.inf, -np.inf)]
	for x in bases:
		for y in exponents:
			with np.errstate(all="ignore"):
				expected = np.power(x, y)
			assert same_value(binding.pow(x, y), expected), (x, y)


def test_pow_negative_zero_base(binding):
	w = binding.width
	assert same_value(binding.pow(w.cast(-0.0), w.cast(3.0)), np.power(w.cast(-0.0), w.cast(3.0)))


def test_pow_int_small_exponents(binding):
	w = binding.width
	assert close(binding.pow_int(w.cast(-2.0), 3), -8.0, w)
	assert close(binding.pow_int(w.cast(-2.0), 2), 4.0, w)
	assert close(binding.pow_int(w.cast(2.0), -2), 0.25, w)
	assert binding.pow_int(w.cast(5.0), 0) == 1
	assert close(binding.pow_int(w.cast(3.0), np.int32(2)), 9.0, w)


def test_pow_int_rounds_large_exponent():
	f32 = rm.binding_for(FLOAT32)
	x = np.float32(1.0000001)
	# 2**24 + 1 is not a float32; the exponent rounds to 2**24
	assert same_value(f32.pow_int(x, 2**24 + 1), np.power(x, np.float32(2**24)))


def test_pow_int_exponent_must_fit_int64(binding):
	with pytest.raises(OverflowError):
		binding.pow_int(binding.width.cast(1.0), 2**70)


def test_pow_int_rejects_float_exponent(binding):
	with pytest.raises(TypeError):
		binding.pow_int(binding.width.cast(2.0), 2.0)


def test_root_even_negative_is_nan(binding):
	w = binding.width
	assert np.isnan(binding.root(w.cast(-8.0), 2))
	assert np.isnan(binding.root(w.cast(-16.0), 4))
	assert np.isnan(binding.root(w.cast(-2.0), 0))


def test_root_odd_negative_keeps_sign(binding):
	w = binding.width
	assert close(binding.root(w.cast(-8.0), 3), -2.0, w)
	assert close(binding.root(w.cast(-32.0), 5), -2.0, w)
	assert close(binding.root(w.cast(8.0), 3), 2.0, w)
	assert close(binding.root(w.cast(16.0), 4), 2.0, w)


def test_root_signed_zero(binding):
	w = binding.width
	got = binding.root(w.cast(-0.0), 2)
	assert got == 0
	assert np.signbit(got)
	assert not np.signbit(binding.root(w.cast(0.0), 3))


def test_root_of_zero_degree(binding):
	w = binding.width
	assert binding.root(w.cast(2.0), 0) == np.inf
	assert binding.root(w.cast(0.5), 0) == 0


def test_root_nan(binding):
	assert np.isnan(binding.root(binding.nan(), 3))


@pytest.mark.parametrize("n", [2, 3, 5])
def test_root_inverts_pow_int(binding, n):
	w = binding.width
	for x in (0.5, 1.5, 3.0, -1.5, -3.0):
		if x < 0 and n % 2 == 0:
			continue
		y = binding.root(binding.pow_int(w.cast(x), n), n)
		assert close(y, x, w, k=16.0), (x, n, y)


def test_free_pow_selects_integer_path():
	assert rm.pow(np.float64(-1.0), 2) == 1
	assert close(rm.pow(np.float64(-2.0), 3), -8.0, FLOAT64)
	assert np.isnan(rm.pow(np.float64(-1.0), 2.0))
	assert type(rm.pow(np.float32(-2.0), 2)) is np.float32


def test_free_pow_bool_exponent_is_not_integral():
	# bool is not an integer exponent; it is treated as a real exponent
	assert np.isnan(rm.pow(np.float64(-1.0), True))


def test_free_root():
	assert close(rm.root(np.float32(-27.0), 3), -3.0, FLOAT32)
	assert np.isnan(rm.root(-4.0, 2))
	assert type(rm.root(27.0, 3)) is FLOAT64.scalar_type


def test_free_pow_zero_dim_integer_exponent():
	assert close(rm.pow(np.float64(-2.0), np.array(2)), 4.0, FLOAT64)
	assert np.isnan(rm.pow(np.float64(-2.0), np.array(2.0)))
