# =============================================================================
# data_processor/engine.py - Plan Execution Engine
# =============================================================================
# Executes plans (sequences of operations) on a fresh DataProcessor.
# Provides per-step results, timing, and stop-or-skip error handling.
# =============================================================================

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from data_processor.exceptions import ProcessorError
from data_processor.processor import DataProcessor
from data_processor.registry import get_operation

logger = logging.getLogger(__name__)


class PlanStep(BaseModel):
    """
    One step of a plan.

    Example:
        {"op": "add", "params": {"value": 5}, "delay_ms": 50}
    """

    op: str = Field(..., min_length=1, description="Registered operation name")
    params: dict[str, Any] = Field(default_factory=dict)
    delay_ms: int | None = Field(
        default=None,
        ge=0,
        description="Delay for async execution (default from settings)"
    )


@dataclass
class StepResult:
    """Result of executing a single step in a plan."""
    step_index: int
    operation: str
    params: dict[str, Any]
    length_before: int = 0
    length_after: int = 0
    duration_ms: float = 0.0
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class ExecutionResult:
    """
    Result of executing an entire plan.

    On a stopped run, values holds the untouched copy of the input.
    """
    success: bool
    values: list[float] = field(default_factory=list)
    steps: list[StepResult] = field(default_factory=list)
    error: str | None = None
    error_step: int | None = None
    total_duration_ms: float = 0.0

    @property
    def length_before(self) -> int:
        if not self.steps:
            return len(self.values)
        return self.steps[0].length_before

    @property
    def length_after(self) -> int:
        return len(self.values)

    @property
    def length_changed(self) -> int:
        return self.length_after - self.length_before


def _parse_step(index: int, step: PlanStep | dict[str, Any]) -> PlanStep:
    if isinstance(step, PlanStep):
        return step
    try:
        return PlanStep.model_validate(step)
    except ValidationError as e:
        raise ProcessorError(
            f"Step {index}: Malformed step - {e.errors()[0]['msg']}",
            code="INVALID_STEP",
            suggestion='Each step needs an "op" key and optional "params" and "delay_ms"',
            details={"step": index},
        ) from e


class Engine:
    """
    Execution engine for transformation plans.

    A plan is a list of operations:
        [
            {"op": "add", "params": {"value": 5}},
            {"op": "filter_greater_than", "params": {"threshold": 35}},
            {"op": "sort", "params": {"ascending": False}},
        ]

    Usage:
        engine = Engine()
        result = engine.execute([5, 10, 15], plan)

        if result.success:
            values = result.values
        else:
            print(f"Failed at step {result.error_step}: {result.error}")
    """

    def __init__(self, stop_on_error: bool = True):
        """
        Initialize the engine.

        Args:
            stop_on_error: If True, stop execution on first error.
                          If False, skip failed steps and continue.
        """
        self.stop_on_error = stop_on_error

    def execute(
        self,
        initial: Iterable[float],
        plan: list[PlanStep | dict[str, Any]],
    ) -> ExecutionResult:
        """
        Execute a plan synchronously.

        Args:
            initial: Input numbers (copied, never modified)
            plan: List of steps

        Returns:
            ExecutionResult with final values and step details

        Raises:
            InvalidValueError: If initial is not a sequence of numbers
        """
        start_time = time.perf_counter()
        processor = DataProcessor(initial)
        original = processor.get_result()
        steps: list[StepResult] = []

        for i, raw_step in enumerate(plan):
            step_start = time.perf_counter()
            length_before = len(processor)
            try:
                step = _parse_step(i, raw_step)
                processor.run_operation(step.op, step.params)
                error = None
            except ProcessorError as e:
                step = None
                error = e.message

            if self._record(steps, i, raw_step, step, length_before, len(processor), step_start, error):
                return self._stopped(original, steps, error, i, start_time)

        return ExecutionResult(
            success=True,
            values=processor.get_result(),
            steps=steps,
            total_duration_ms=(time.perf_counter() - start_time) * 1000,
        )

    async def execute_async(
        self,
        initial: Iterable[float],
        plan: list[PlanStep | dict[str, Any]],
    ) -> ExecutionResult:
        """
        Execute a plan through the async variants.

        Steps with an async variant wait for their delay_ms first; sort runs
        synchronously in between.
        """
        start_time = time.perf_counter()
        processor = DataProcessor(initial)
        original = processor.get_result()
        steps: list[StepResult] = []

        for i, raw_step in enumerate(plan):
            step_start = time.perf_counter()
            length_before = len(processor)
            try:
                step = _parse_step(i, raw_step)
                operation_cls = get_operation(step.op)
                if operation_cls is not None and not operation_cls.info().has_async_variant:
                    processor.run_operation(step.op, step.params)
                else:
                    await processor.run_operation_async(step.op, step.params, delay_ms=step.delay_ms)
                error = None
            except ProcessorError as e:
                step = None
                error = e.message

            if self._record(steps, i, raw_step, step, length_before, len(processor), step_start, error):
                return self._stopped(original, steps, error, i, start_time)

        return ExecutionResult(
            success=True,
            values=processor.get_result(),
            steps=steps,
            total_duration_ms=(time.perf_counter() - start_time) * 1000,
        )

    def _record(
        self,
        steps: list[StepResult],
        index: int,
        raw_step: PlanStep | dict[str, Any],
        step: PlanStep | None,
        length_before: int,
        length_after: int,
        step_start: float,
        error: str | None,
    ) -> bool:
        """Append a StepResult. Returns True when the run must stop."""
        if step is not None:
            op_name, params = step.op, step.params
        elif isinstance(raw_step, PlanStep):
            op_name, params = raw_step.op, raw_step.params
        elif isinstance(raw_step, dict):
            raw_params = raw_step.get("params")
            op_name = str(raw_step.get("op") or "")
            params = dict(raw_params) if isinstance(raw_params, dict) else {}
        else:
            op_name, params = "", {}

        steps.append(StepResult(
            step_index=index,
            operation=op_name,
            params=params,
            length_before=length_before,
            length_after=length_after,
            duration_ms=(time.perf_counter() - step_start) * 1000,
            error=error,
        ))

        if error is None:
            return False
        logger.warning("Step %d (%s) failed: %s", index, op_name or "?", error)
        return self.stop_on_error

    @staticmethod
    def _stopped(
        original: list[float],
        steps: list[StepResult],
        error: str | None,
        index: int,
        start_time: float,
    ) -> ExecutionResult:
        return ExecutionResult(
            success=False,
            values=original,
            steps=steps,
            error=error or f"Step {index} failed",
            error_step=index,
            total_duration_ms=(time.perf_counter() - start_time) * 1000,
        )

    def validate_plan(self, plan: list[PlanStep | dict[str, Any]]) -> tuple[bool, list[str]]:
        """
        Validate a plan without executing it.

        Checks that all operations exist and parameters are valid.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        for i, raw_step in enumerate(plan):
            try:
                step = _parse_step(i, raw_step)
            except ProcessorError as e:
                errors.append(e.message)
                continue

            operation_cls = get_operation(step.op)
            if operation_cls is None:
                errors.append(f"Step {i}: Unknown operation '{step.op}'")
                continue

            valid, param_errors = operation_cls().validate_params(step.params)
            if not valid:
                for err in param_errors:
                    errors.append(f"Step {i}: {err}")

        return len(errors) == 0, errors
