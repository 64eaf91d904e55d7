#!/usr/bin/env python
"""Analyze a single page from the command line.

Prints the success payload as JSON, or the error payload and exits 1.

Usage:
    python scripts/analyze_url.py example.com
    python scripts/analyze_url.py https://example.com --signals
"""

import argparse
import asyncio
import json
import sys

# Add project root to path
sys.path.insert(0, ".")

from api.exceptions import NexusError  # noqa: E402
from api.logging import setup_logging  # noqa: E402
from scanner.pipeline import analyze_url  # noqa: E402


async def run(url: str, include_signals: bool = False) -> tuple[dict, int]:
    """Run the pipeline once. Returns (payload, exit code)."""
    try:
        result = await analyze_url(url)
    except NexusError as e:
        return e.to_payload(), 1

    payload = result.to_dict()
    if include_signals and result.signals is not None:
        payload["signals"] = result.signals.to_dict()
    return payload, 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze a single web page")
    parser.add_argument("url", help="Page URL or bare host (https is assumed)")
    parser.add_argument(
        "--signals",
        action="store_true",
        help="Include the extracted structural signals in the output",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    payload, code = asyncio.run(run(args.url, include_signals=args.signals))
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    sys.exit(code)


if __name__ == "__main__":
    main()
