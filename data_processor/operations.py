# =============================================================================
# data_processor/operations.py - Transformation Operations
# =============================================================================
# The element-wise and reordering operations a DataProcessor can chain:
# add, multiply, filter_greater_than, sort.
#
# Every operation returns a new Series and leaves its input untouched.
# =============================================================================

from __future__ import annotations

from typing import Any

import pandas as pd

from data_processor.registry import register_operation
from data_processor.types import Operation, OperationInfo, ParamDef


# =============================================================================
# add
# =============================================================================


@register_operation
class Add(Operation):
    """Add a value to each element."""

    @classmethod
    def info(cls) -> OperationInfo:
        return OperationInfo(
            name="add",
            description="Add a value to every element",
            params=[
                ParamDef(
                    name="value",
                    type="number",
                    description="Value added to each element",
                ),
            ],
        )

    def apply(self, values: pd.Series, params: dict[str, Any]) -> pd.Series:
        return values + params["value"]


# =============================================================================
# multiply
# =============================================================================


@register_operation
class Multiply(Operation):
    """Multiply each element by a value."""

    @classmethod
    def info(cls) -> OperationInfo:
        return OperationInfo(
            name="multiply",
            description="Multiply every element by a value",
            params=[
                ParamDef(
                    name="value",
                    type="number",
                    description="Multiplier",
                ),
            ],
        )

    def apply(self, values: pd.Series, params: dict[str, Any]) -> pd.Series:
        return values * params["value"]


# =============================================================================
# filter_greater_than
# =============================================================================


@register_operation
class FilterGreaterThan(Operation):
    """Keep elements strictly greater than a threshold."""

    @classmethod
    def info(cls) -> OperationInfo:
        return OperationInfo(
            name="filter_greater_than",
            description="Keep only elements strictly greater than a threshold, preserving order",
            params=[
                ParamDef(
                    name="threshold",
                    type="number",
                    description="Elements equal to or below this are dropped",
                ),
            ],
            may_change_length=True,
        )

    def apply(self, values: pd.Series, params: dict[str, Any]) -> pd.Series:
        return values[values > params["threshold"]].reset_index(drop=True)


# =============================================================================
# sort
# =============================================================================


@register_operation
class Sort(Operation):
    """Sort elements numerically. Always synchronous."""

    @classmethod
    def info(cls) -> OperationInfo:
        return OperationInfo(
            name="sort",
            description="Sort elements in ascending or descending numeric order",
            params=[
                ParamDef(
                    name="ascending",
                    type="bool",
                    required=False,
                    default=True,
                    description="Sort ascending (True) or descending (False)",
                ),
            ],
            has_async_variant=False,
        )

    def apply(self, values: pd.Series, params: dict[str, Any]) -> pd.Series:
        return values.sort_values(
            ascending=bool(params.get("ascending", True)),
            ignore_index=True,
        )
