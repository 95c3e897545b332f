#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from gocardless.pro import Client
from gocardless.pro.core import Environment


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List GoCardless creditors via REST")
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("environment", nargs="?", default="sandbox", choices=["sandbox", "live"])
    p.add_argument("--all", action="store_true", help="Walk every page instead of one")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    token = os.environ["GOCARDLESS_ACCESS_TOKEN"]

    async with Client(token, environment=Environment(args.environment)) as client:
        if args.all:
            creditors = [c async for c in client.creditors.all().limit(args.limit)]
            print(f"All creditors ({args.environment}): {len(creditors)}")
        else:
            page = await client.creditors.list().limit(args.limit).execute()
            creditors = page.items
            print(f"First page ({args.environment}): {len(creditors)}, next cursor={page.after}")

        print(f"{'ID':16} | {'Name':32} | {'Country':>7} | Created")
        print("-" * 80)
        for c in creditors:
            print(f"{c.id:16} | {c.name or '':32} | {c.country_code or '':>7} | {c.created_at}")


if __name__ == "__main__":
    asyncio.run(main())
