import asyncio
import logging
import pytest

from core.environment.config import Settings
from core.testcase import create_test_case


@create_test_case("TC-W01: Should run an async body with fixtures")
async def test_wrapped_body_receives_fixtures(settings: Settings):
    await asyncio.sleep(0)
    assert settings.endpoints.tokens == "/api/tokens"


def test_wrapper_marks_asyncio_and_keeps_name():
    async def body():
        return None

    wrapped = create_test_case("TC-W02: named", timeout_ms=250)(body)

    assert wrapped.__name__ == "body"
    assert wrapped.test_case_name == "TC-W02: named"
    assert wrapped.timeout_ms == 250
    assert any(mark.name == "asyncio" for mark in wrapped.pytestmark)


def test_default_budget_comes_from_settings():
    async def body():
        return None

    wrapped = create_test_case("TC-W03: default budget")(body)

    assert wrapped.timeout_ms == Settings().test_timeout_ms


@pytest.mark.asyncio
async def test_failure_is_logged_and_reraised(caplog):
    caplog.set_level(logging.ERROR, logger="explorer_api_tests")

    async def body():
        assert 1 == 2, "status mismatch"

    wrapped = create_test_case("TC-W04: Should fail loudly", timeout_ms=1000)(body)

    with pytest.raises(AssertionError, match="status mismatch"):
        await wrapped()
    assert "Test failed: TC-W04: Should fail loudly" in caplog.text


@pytest.mark.asyncio
async def test_budget_overrun_fails_the_test(caplog):
    caplog.set_level(logging.ERROR, logger="explorer_api_tests")

    async def body():
        await asyncio.sleep(1)

    wrapped = create_test_case("TC-W05: Should time out", timeout_ms=20)(body)

    with pytest.raises(asyncio.TimeoutError):
        await wrapped()
    assert "Test failed: TC-W05: Should time out" in caplog.text


@pytest.mark.parametrize("timeout_ms", [0, -5])
def test_non_positive_budget_is_rejected(timeout_ms):
    with pytest.raises(ValueError, match="must be positive"):
        create_test_case("TC-W06: Should reject budget", timeout_ms=timeout_ms)
