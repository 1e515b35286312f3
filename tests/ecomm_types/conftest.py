import os

import pytest


@pytest.fixture(scope="session")
def _ecomm_types_domain(request):
    """Initialize the ecomm_types domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from ecomm_types.domain import ecomm_types

    ecomm_types.init(traverse=False)
    return ecomm_types


@pytest.fixture(autouse=True)
def run_around_tests(_ecomm_types_domain):
    """Push domain context before each test, pop it after."""
    ctx = _ecomm_types_domain.domain_context()
    ctx.push()

    yield

    ctx.pop()
