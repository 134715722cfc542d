import pytest


@pytest.fixture(params=["z3", "backtracking"])
def backend_name(request):
    return request.param
