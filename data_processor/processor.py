# =============================================================================
# data_processor/processor.py - Chainable Data Processor
# =============================================================================
# A container around a numeric sequence with chainable transformations.
#
# Every transformation replaces the internal sequence and returns the same
# instance, so calls can be chained:
#
#   result = create_processor([1, 2, 3]).add(5).multiply(2).get_result()
#   # [12, 14, 16]
#
# The *_async variants wait for delay_ms before doing exactly the same work:
#
#   p = await create_processor_async([1, 2, 3])
#   p = await p.add_async(5)
#   p = await p.multiply_async(2)
#   result = await p.get_result_async()
#
# sort() has no async variant; call it directly between awaits.
# =============================================================================

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from data_processor import operations  # noqa: F401  (registers operations)
from data_processor.config import get_settings
from data_processor.exceptions import (
    InvalidParamsError,
    InvalidValueError,
    UnknownOperationError,
)
from data_processor.registry import get_operation, list_operations
from data_processor.types import Operation, resolve_delay, to_series

logger = logging.getLogger(__name__)


async def _pause(delay_ms: int) -> None:
    await asyncio.sleep(delay_ms / 1000)


def _default_delay(delay_ms: int | None) -> int:
    return resolve_delay(delay_ms, get_settings().PROCESSOR_DEFAULT_DELAY_MS)


class DataProcessor:
    """
    Chainable processor over an ordered sequence of numbers.

    The initial sequence is copied on construction, and get_result() always
    returns a copy, so callers never share storage with the processor.
    Invalid input raises InvalidValueError before anything is mutated.
    """

    def __init__(self, initial: Iterable[float] = ()):
        self._values = to_series(initial)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"DataProcessor({self._values.tolist()!r})"

    # -------------------------------------------------------------------------
    # Generic dispatch
    # -------------------------------------------------------------------------

    @staticmethod
    def _resolve(op: str, params: dict[str, Any], async_only: bool = False) -> Operation:
        operation_cls = get_operation(op)
        if operation_cls is None:
            raise UnknownOperationError(op, list_operations())
        if async_only and not operation_cls.info().has_async_variant:
            raise UnknownOperationError(
                op, list_operations(async_only=True), kind="async operation"
            )

        operation = operation_cls()
        valid, errors = operation.validate_params(params)
        if not valid:
            raise InvalidParamsError(op, errors)
        return operation

    def _run(self, operation: Operation, params: dict[str, Any]) -> DataProcessor:
        name = operation.info().name
        try:
            result = operation.apply(self._values, operation.resolve_params(params))
        except OverflowError as e:
            raise InvalidValueError(name, params, f"overflows the float range ({e})") from e
        if result.isna().any():
            raise InvalidValueError(name, params, "would produce NaN values")

        length_before = len(self._values)
        self._values = result
        logger.debug(
            "%s(%s): %d -> %d values",
            name,
            ", ".join(f"{k}={v!r}" for k, v in params.items()),
            length_before,
            len(self._values),
        )
        return self

    def run_operation(self, op: str, params: dict[str, Any]) -> DataProcessor:
        """
        Apply a registered operation with params given as a dict.

        Unlike apply(), any parameter name is accepted here and checked
        against the operation's definitions.

        Raises:
            UnknownOperationError: If op is not registered
            InvalidParamsError: If params fail validation
        """
        operation = self._resolve(op, params)
        return self._run(operation, params)

    async def run_operation_async(
        self,
        op: str,
        params: dict[str, Any],
        delay_ms: int | None = None,
    ) -> DataProcessor:
        """
        Wait delay_ms, then apply a registered operation with dict params.

        Parameters are validated before waiting. Operations without an async
        variant (sort) raise UnknownOperationError.
        """
        delay = _default_delay(delay_ms)
        operation = self._resolve(op, params, async_only=True)
        await _pause(delay)
        return self._run(operation, params)

    def apply(self, op: str, **params: Any) -> DataProcessor:
        """
        Apply a registered operation by name.

        Example:
            processor.apply("filter_greater_than", threshold=10)
        """
        return self.run_operation(op, params)

    async def apply_async(
        self,
        op: str,
        delay_ms: int | None = None,
        **params: Any,
    ) -> DataProcessor:
        """Keyword form of run_operation_async."""
        return await self.run_operation_async(op, params, delay_ms=delay_ms)

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def add(self, value: float) -> DataProcessor:
        """Add value to each element."""
        return self.apply("add", value=value)

    async def add_async(self, value: float, delay_ms: int | None = None) -> DataProcessor:
        """Async version of add (default delay: PROCESSOR_DEFAULT_DELAY_MS)."""
        return await self.apply_async("add", delay_ms=delay_ms, value=value)

    def multiply(self, value: float) -> DataProcessor:
        """Multiply each element by value."""
        return self.apply("multiply", value=value)

    async def multiply_async(self, value: float, delay_ms: int | None = None) -> DataProcessor:
        """Async version of multiply."""
        return await self.apply_async("multiply", delay_ms=delay_ms, value=value)

    def filter_greater_than(self, threshold: float) -> DataProcessor:
        """Keep only elements strictly greater than threshold."""
        return self.apply("filter_greater_than", threshold=threshold)

    async def filter_greater_than_async(
        self,
        threshold: float,
        delay_ms: int | None = None,
    ) -> DataProcessor:
        """Async version of filter_greater_than."""
        return await self.apply_async(
            "filter_greater_than", delay_ms=delay_ms, threshold=threshold
        )

    def sort(self, ascending: bool = True) -> DataProcessor:
        """Sort numerically, ascending by default."""
        return self.apply("sort", ascending=ascending)

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def get_result(self) -> list[float]:
        """Return a copy of the current values."""
        return self._values.tolist()

    async def get_result_async(self, delay_ms: int | None = None) -> list[float]:
        """Wait delay_ms, then return a copy of the current values."""
        await _pause(_default_delay(delay_ms))
        return self._values.tolist()


# =============================================================================
# Factories
# =============================================================================

def create_processor(initial: Iterable[float] = ()) -> DataProcessor:
    """Create a new DataProcessor over a copy of initial."""
    return DataProcessor(initial)


async def create_processor_async(
    initial: Iterable[float] = (),
    delay_ms: int | None = None,
) -> DataProcessor:
    """
    Create a new DataProcessor after a delay.

    Simulates fetching the initial data from a remote source. The input is
    copied and validated before waiting, so later changes to it are not seen.

    Args:
        initial: Initial numbers
        delay_ms: Delay in milliseconds (default: PROCESSOR_CREATE_DELAY_MS)
    """
    delay = resolve_delay(delay_ms, get_settings().PROCESSOR_CREATE_DELAY_MS)
    processor = DataProcessor(initial)
    await _pause(delay)
    logger.debug("Created processor with %d values after %dms", len(processor), delay)
    return processor
