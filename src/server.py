"""Protean Engine runner for the marketplace domains.

Starts Engine workers that process events asynchronously:
- OutboxProcessor: polls outbox table, publishes events to Redis Streams
- StreamSubscriptions: reads Redis Streams, invokes projectors and event handlers

Directory events reach the Reviews and Tips rosters through these engines.

Usage:
    python src/server.py                    # Run every domain engine
    python src/server.py --domain reviews   # Run only the reviews engine
"""

import argparse
import asyncio

from domains import DOMAIN_NAMES, get_domain
from protean.server.engine import Engine


async def run(domain_names):
    engines = [Engine(get_domain(name)) for name in domain_names]
    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Marketplace Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    domain_names = [args.domain] if args.domain else list(DOMAIN_NAMES)

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
