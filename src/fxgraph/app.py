# src/fxgraph/app.py
"""
Application Entry Point - Exchange Initialization and Startup

This module serves as the composition root for the exchange engine.
It wires settings, logging and the ExchangeService together. The
interactive session layer that drives conversions lives outside this
package and receives the service built here.

Files that USE this module:
- fxgraph console script (pyproject entry point)
- python -m fxgraph.app

Files that this module USES:
- fxgraph.shared.logging_conf (setup_logging for logging configuration)
- fxgraph.config (settings for configuration management)
- fxgraph.application.exchange_service (ExchangeService)
- fxgraph.adapters.formatting.formatter (rate_table for the startup log)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import random  # Seedable random source handed to the service
from typing import Optional  # Type hints for optional values

from fxgraph.adapters.formatting.formatter import rate_table  # Text layout for the rate table
from fxgraph.application.exchange_service import ExchangeService  # Rate lookup and conversion
from fxgraph.config import Settings, settings  # Pydantic settings model and global instance
from fxgraph.shared.logging_conf import setup_logging  # Configure logging with file rotation


def build_exchange(config: Settings) -> ExchangeService:
    """
    Build an ExchangeService from settings.

    Args:
        config: Loaded Settings instance

    Returns:
        ExchangeService seeded from RNG_SEED (if set), with inverse rates
        completed when COMPLETE_INVERSES is true
    """
    rng = random.Random(config.rng_seed) if config.rng_seed is not None else random.Random()
    service = ExchangeService(
        initial_rates=config.rate_table(),
        rng=rng,
        max_percent=config.perturb_max_pct,
    )
    if config.complete_inverses:
        service.complete_inverses()
    return service


def start(config: Optional[Settings] = None) -> ExchangeService:
    """
    Configure logging, build the exchange and log its starting rate table.

    Args:
        config: Settings to use; the global settings instance if omitted

    Returns:
        The ready ExchangeService
    """
    if config is None:
        config = settings

    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        log_dir=config.log_dir,
        max_bytes=config.log_max_bytes,
        backup_count=config.log_backup_count,
        log_to_stdout=config.log_stdout,
    )
    logger = logging.getLogger(__name__)

    service = build_exchange(config)
    logger.info(
        "Exchange ready: %d rates, perturbation bound ±%d%%, seed=%s",
        len(service.graph),
        service.max_percent,
        config.rng_seed,
    )
    logger.info("Current rates (8 digits):\n%s", rate_table(service.dump()).rstrip("\n"))
    return service


def main() -> None:
    """Console entry point: start the exchange with the global settings."""
    start()


if __name__ == "__main__":
    main()
