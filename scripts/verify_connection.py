#!/usr/bin/env python3
"""Check that a Hugging Face token is configured and accepted.

Exits with status 1 when the token is missing or rejected.
"""

import argparse
import asyncio
import sys

from cv_optimizer.config.logging_config import setup_logging
from cv_optimizer.constants.error_constants import ErrorConstants
from cv_optimizer.services.connection_verifier import verify_connection


async def run() -> bool:
    diagnostics = await verify_connection()

    print("=" * 60)
    print("Hugging Face connection check")
    print("=" * 60)
    if not diagnostics.token_found:
        print(f"Token: not found\n{diagnostics.error}")
        return False

    print(f"Token: found ({diagnostics.token_prefix})")
    if diagnostics.response_time_ms is not None:
        print(f"Response time: {diagnostics.response_time_ms:.0f} ms")

    if diagnostics.connected:
        print(f"Authenticated as: {diagnostics.user or 'unknown user'}")
        return True

    print(f"Connection failed: {diagnostics.error}")
    print("\nTroubleshooting steps:")
    for index, step in enumerate(ErrorConstants.TROUBLESHOOTING_STEPS, start=1):
        print(f"  {index}. {step}")
    return False


def main():
    """Main function."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.parse_args()
    setup_logging()
    success = asyncio.run(run())
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
