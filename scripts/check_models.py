#!/usr/bin/env python3
"""Probe which configured models the enabled inference providers can serve."""

import argparse
import asyncio
import sys
from typing import List

from cv_optimizer.config.logging_config import setup_logging
from cv_optimizer.config.settings import get_config
from cv_optimizer.constants.llm_constants import LLMConstants
from cv_optimizer.core.container import get_container
from cv_optimizer.error_handling.exceptions import ConfigurationError
from cv_optimizer.models.diagnostics_models import ModelProbeResult
from cv_optimizer.services.llm_fallback_chain import build_candidate_chain


def print_table(results: List[ModelProbeResult]):
    width = max([len("Model")] + [len(result.model) for result in results])
    print(f"{'Model':<{width}}  {'Mode':<6}  {'Status':<11}  {'Latency':>9}  Error")
    print("-" * (width + 48))
    for result in results:
        mode = "chat" if result.conversational else "text"
        status = "available" if result.available else "unavailable"
        latency = f"{result.latency_ms:.0f} ms" if result.latency_ms is not None else "-"
        error = result.error_category or ""
        print(f"{result.model:<{width}}  {mode:<6}  {status:<11}  {latency:>9}  {error}")


async def run(models: List[str], delay: float) -> bool:
    probe = get_container().model_probe()
    results = await probe.check_models(models, delay_seconds=delay)
    print_table(results)
    available = [result.model for result in results if result.available]
    print(f"\n{len(available)} of {len(results)} models available")
    return bool(available)


def main():
    """Main function."""
    config = get_config()
    default_models = build_candidate_chain(
        config.huggingface.primary_model, config.huggingface.fallback_models
    )

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--models",
        nargs="+",
        default=default_models,
        help="Model ids to probe (default: the configured fallback chain)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=LLMConstants.PROBE_DELAY_SECONDS,
        help="Seconds to wait between requests",
    )
    args = parser.parse_args()

    setup_logging()
    try:
        success = asyncio.run(run(args.models, args.delay))
    except ConfigurationError as e:
        print(e.message)
        sys.exit(1)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
