import asyncio
import logging

from core.testcase import create_test_case
from explorer.schemas import TokenPairEnvelope, TokenPairRecord

logger = logging.getLogger("explorer_api_tests")


def assert_broken_api(response):
    assert response.status in (500, 0)
    if response.status == 500:
        assert response.data == "Server Error"
    else:
        assert "error" in response.data


class TestTokenPairsAPI:
    """
    Functional tests for GET /api/token-pairs.
    """

    @create_test_case("TC001: Should handle API errors gracefully")
    async def test_handles_api_errors(self, get_token_pairs, validator):
        response = await get_token_pairs()

        if response.status == 200:
            assert response.data["success"] == "ok"
            validation = validator.validate_array(response.data["pairs"], "token_pair")
            if not validation.is_valid:
                logger.error(f"Schema validation errors: {validation.errors}")
            assert validation.is_valid is True
        else:
            assert_broken_api(response)

    @create_test_case("TC002: Should handle timeout scenarios")
    async def test_handles_timeout(self, get_token_pairs):
        response = await get_token_pairs(options={"timeout_ms": 1})

        assert response.status == 0
        assert response.data == {"error": "No response received"}

    @create_test_case("TC003: Should test API availability")
    async def test_availability(self, get_token_pairs):
        response = await get_token_pairs()

        assert response.status is not None
        logger.info(f"Token Pairs API Response: {response.to_dict()}")

    @create_test_case("TC004: Should reject other HTTP methods")
    async def test_rejects_post(self, get_token_pairs):
        response = await get_token_pairs(options={"method": "POST", "data": {"test": "data"}})

        assert response.status in (404, 405)

    @create_test_case("TC005: Should validate response structure when API works")
    async def test_response_structure(self, get_token_pairs, settings):
        response = await get_token_pairs()

        if response.status != 200:
            assert_broken_api(response)
            return

        assert isinstance(response.data["pairs"], list)
        if response.data["pairs"]:
            first_pair = response.data["pairs"][0]
            for field in settings.schemas["token_pair"].required:
                assert field in first_pair

    @create_test_case("TC006: Should answer within the request budget")
    async def test_performance(self, get_token_pairs, timer):
        performance = await timer.measure(get_token_pairs, 6000)

        assert performance.is_within_limit is True
        assert performance.response is not None

    @create_test_case("TC007: Should handle concurrent requests")
    async def test_concurrent_requests(self, get_token_pairs):
        responses = await asyncio.gather(*[get_token_pairs() for _ in range(3)])

        assert len(responses) == 3
        for response in responses:
            if response.status != 200:
                assert_broken_api(response)


class TestTokenPairByIdAPI:
    """
    Functional tests for GET /api/token-pairs/:id.
    """

    @create_test_case("TC008: Should return a listed pair by id")
    async def test_pair_by_id(self, get_token_pairs):
        all_pairs = await get_token_pairs()

        if all_pairs.status != 200 or not all_pairs.data["pairs"]:
            assert_broken_api(all_pairs)
            return

        pair_id = all_pairs.data["pairs"][0]["id"]
        response = await get_token_pairs(pair_id)

        assert response.status == 200
        envelope = TokenPairEnvelope.model_validate(response.data)
        assert envelope.pair.id == pair_id

    @create_test_case("TC009: Should return 404 for an unknown pair id")
    async def test_unknown_pair(self, get_token_pairs, settings):
        response = await get_token_pairs(settings.sample_data.unknown_pair_id)

        if response.status == 404:
            assert "error" in response.data
        else:
            assert_broken_api(response)

    @create_test_case("TC010: Should handle malformed pair ID")
    async def test_malformed_pair(self, get_token_pairs, settings):
        response = await get_token_pairs(settings.sample_data.malformed_pair_id)

        assert response.status in (404, 0)


class TestTokenPairsDataValidation:

    @create_test_case("TC011: Should validate pair data when API works")
    async def test_pair_values(self, get_token_pairs):
        response = await get_token_pairs()

        if response.status != 200:
            assert_broken_api(response)
            return

        for pair in response.data["pairs"]:
            record = TokenPairRecord.model_validate(pair)
            assert record.token0.id != record.token1.id
            assert record.reserve0 >= 0
            assert record.reserve1 >= 0
