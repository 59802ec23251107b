#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from packet.metal import ClientConfig, ListOptions, MetalClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every device batch of a project")
    p.add_argument("project_id")
    p.add_argument("--per-page", type=int, default=20)
    p.add_argument("--page", type=int, default=0, help="pin a single page (0 = all pages)")
    p.add_argument("--include", action="append", default=[], help="sub-resource to expand")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = ClientConfig.from_env(headers={"X-Auth-Token": os.environ.get("METAL_AUTH_TOKEN", "")})
    opts = ListOptions(includes=args.include, per_page=args.per_page, page=args.page)

    async with MetalClient(config) as client:
        batches = await client.batches.list(args.project_id, opts)

    print("=" * 65)
    print(f"Project    : {args.project_id}")
    print(f"Batches    : {len(batches)}")
    if opts.meta is not None:
        print(f"Last page  : {opts.meta.current_page} of {opts.meta.last_page} ({opts.meta.total} total)")
    print("=" * 65)
    print(f"{'ID':38} | {'State':12} | {'Quantity':>8} | {'Devices':>7}")
    print("-" * 73)
    for b in batches:
        print(f"{b.id:38} | {b.state or '-':12} | {b.quantity or 0:>8} | {len(b.devices):>7}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
