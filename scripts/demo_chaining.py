#!/usr/bin/env python3
"""Walk through sync, async and parallel processor chains.

Set DEBUG=true to see every transformation logged. Good places for
breakpoints are marked with "# break".
"""

import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data_processor import (
    Engine,
    ProcessorError,
    create_processor,
    create_processor_async,
)
from data_processor.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def section(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def run_sync() -> None:
    section("SYNC CHAINING")

    result = create_processor([1, 2, 3]).add(5).multiply(2).get_result()
    print(f"[1, 2, 3] -> add(5) -> multiply(2) = {result}")

    result = (
        create_processor([5, 10, 15, 20, 25])
        .add(5)                  # [10, 15, 20, 25, 30]
        .multiply(2)             # [20, 30, 40, 50, 60]
        .filter_greater_than(35)  # [40, 50, 60]
        .sort(False)             # [60, 50, 40]
        .get_result()
    )
    print(f"[5..25] -> add, multiply, filter > 35, sort desc = {result}")


async def run_async() -> None:
    section("ASYNC CHAINING")

    processor = await create_processor_async([5, 10, 15, 20, 25])
    processor = await processor.add_async(5)
    processor = await processor.multiply_async(2)
    processor = await processor.filter_greater_than_async(35)
    processor.sort(False)  # break: sync call inside an async chain
    result = await processor.get_result_async()
    print(f"async chain = {result}")

    section("PARALLEL CHAINS")

    async def chain(
        initial: list[int],
        create_delay: int,
        add: float,
        factor: float,
    ) -> list[float]:
        p = await create_processor_async(initial, delay_ms=create_delay)
        p = await p.add_async(add)
        p = await p.multiply_async(factor)
        return await p.get_result_async()

    first, second = await asyncio.gather(
        chain([1, 2, 3], 50, 10, 2),
        chain([4, 5, 6], 100, 5, 3),
    )
    print(f"[1, 2, 3] -> +10 -> *2 = {first}")
    print(f"[4, 5, 6] -> +5 -> *3 = {second}")


def run_errors() -> None:
    section("ERROR HANDLING")

    processor = create_processor([1, 2, 3]).add(5)
    try:
        processor.multiply("not a number")
    except ProcessorError as e:
        print(f"Rejected: {e}")  # break: the processor is unchanged here
    print(f"Still {processor.get_result()}")

    result = Engine().execute([1, 2, 3], [
        {"op": "add", "params": {"value": 5}},
        {"op": "divide", "params": {"value": 2}},
    ])
    print(f"Plan stopped at step {result.error_step}: {result.error}")
    print(f"Values returned untouched: {result.values}")


def run_demo() -> None:
    logger.info(
        "Default delays: %dms (transforms), %dms (create)",
        settings.PROCESSOR_DEFAULT_DELAY_MS,
        settings.PROCESSOR_CREATE_DELAY_MS,
    )
    run_sync()
    asyncio.run(run_async())
    run_errors()

    print("\n" + "=" * 70)
    print("  DEMO COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    run_demo()
