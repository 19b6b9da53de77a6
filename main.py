import asyncio
import logging
import sys
from dishka import AsyncContainer

from core.container import build_container
from core.environment.config import Settings
from explorer.entities import ValidationResult
from explorer.validation import SchemaValidator
from explorer.usecases import GetHistoryUseCase, GetTokensUseCase, GetTokenPairsUseCase


def _payload(data, key: str):
    return data.get(key) if isinstance(data, dict) else data


async def run_smoke_check(container: AsyncContainer) -> bool:
    """
    Probe every endpoint once and log a verdict per endpoint.

    Parameters
    ----------
    container : AsyncContainer
        Dependency container

    Returns
    -------
    bool
        True when every endpoint produced an HTTP response
    """
    settings = await container.get(Settings, component="environment")
    logger = await container.get(logging.Logger, component="logger")
    validator = await container.get(SchemaValidator, component="explorer")

    async with container() as request_container:
        get_tokens = await request_container.get(GetTokensUseCase, component="explorer")
        get_token_pairs = await request_container.get(GetTokenPairsUseCase, component="explorer")
        get_history = await request_container.get(GetHistoryUseCase, component="explorer")

        sample = settings.sample_data
        from_, to = sample.valid_time_range()
        tokens, pairs, history = await asyncio.gather(
            get_tokens(),
            get_token_pairs(),
            get_history(sample.valid_symbol, sample.valid_resolution, from_, to)
        )

    checks: dict[str, tuple[int, ValidationResult]] = {
        "tokens": (tokens.status, validator.validate_array(_payload(tokens.data, "tokens"), "token")),
        "token-pairs": (pairs.status, validator.validate_array(_payload(pairs.data, "pairs"), "token_pair")),
        "history": (history.status, validator.validate(history.data, "history")),
    }

    for name, (status, validation) in checks.items():
        verdict = "schema ok" if validation.is_valid else f"{len(validation.errors)} schema errors"
        logger.info(f"{name}: status {status}, {verdict}")
        for error in validation.errors[:5]:
            logger.info(f"{name}: {error}")

    return all(status != 0 for status, _ in checks.values())


async def _main() -> bool:
    container = build_container()
    try:
        return await run_smoke_check(container)
    finally:
        await container.close()


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(_main()) else 1)
