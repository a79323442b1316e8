import pytest

from realmath.bindings import BINDINGS
from realmath.capabilities import LogGammaFunctions


BOUND = list(BINDINGS.values())
LOG_GAMMA_BOUND = [b for b in BOUND if isinstance(b, LogGammaFunctions)]


def _binding_id(binding) -> str:
	return binding.width.name


@pytest.fixture(params=BOUND, ids=_binding_id)
def binding(request):
	return request.param


@pytest.fixture(params=LOG_GAMMA_BOUND, ids=_binding_id)
def gamma_binding(request):
	return request.param
