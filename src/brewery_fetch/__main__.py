"""Fetch breweries once and log the outcome: python -m brewery_fetch [name=value ...]."""

import asyncio
import sys
from typing import Dict, List, Optional

from brewery_fetch.client import BreweryAPIClient
from brewery_fetch.outcome import Failure
from brewery_fetch.utils.config import get_config
from brewery_fetch.utils.logger import set_package_level, setup_logger


def parse_parameters(args: List[str]) -> Dict[str, str]:
    """Turn name=value arguments into a query parameter mapping."""
    parameters = {}
    for arg in args:
        name, sep, value = arg.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected name=value, got {arg!r}")
        parameters[name] = value
    return parameters


def main(argv: Optional[List[str]] = None) -> int:
    logger = setup_logger("brewery_fetch.cli")

    try:
        config = get_config()
        parameters = parse_parameters(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        logger.error(str(e))
        return 2

    set_package_level("brewery_fetch", config.log_level)

    with BreweryAPIClient(config.api) as client:
        outcome = asyncio.run(client.fetch(parameters))

    if isinstance(outcome, Failure):
        logger.error(f"{outcome.kind.value}: {outcome.error}")
        return 1

    for brewery in outcome.breweries:
        logger.info(f"{brewery.name} ({brewery.brewery_type}) - {brewery.city}, {brewery.state}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
