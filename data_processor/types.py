# =============================================================================
# data_processor/types.py - Core Types and Validation
# =============================================================================
# Defines the operation contract and the numeric validation rules shared by
# the processor and the engine.
# =============================================================================

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from data_processor.exceptions import InvalidDelayError, InvalidValueError


# =============================================================================
# Validation Helpers
# =============================================================================

def is_number(value: Any) -> bool:
    """
    Check that a value is a well-defined real number.

    Booleans are rejected even though Python treats them as ints.
    NaN is rejected; infinities are allowed.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return not math.isnan(value)


def to_series(values: Iterable[Any], name: str = "initial") -> pd.Series:
    """
    Copy an iterable of numbers into a fresh Series.

    Raises:
        InvalidValueError: If values is not a sequence or holds a non-number
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidValueError(name, values, "must be a sequence of numbers")

    items = list(values)
    for i, item in enumerate(items):
        if not is_number(item):
            raise InvalidValueError(f"{name}[{i}]", item)

    if not items:
        return pd.Series([], dtype="float64")
    if all(isinstance(item, numbers.Integral) for item in items):
        # Python ints in an object Series never wrap around like int64/uint64
        return pd.Series([int(item) for item in items], dtype=object)
    try:
        return pd.Series([float(item) for item in items], dtype="float64")
    except OverflowError as e:
        raise InvalidValueError(name, values, "mixes floats with ints too large for a float") from e


def resolve_delay(delay_ms: Any, default: int) -> int:
    """Return delay_ms, or default when it is None. Rejects negatives."""
    if delay_ms is None:
        return default
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, numbers.Integral):
        raise InvalidDelayError(delay_ms)
    if delay_ms < 0:
        raise InvalidDelayError(delay_ms)
    return int(delay_ms)


# =============================================================================
# Parameter Definition
# =============================================================================

@dataclass
class ParamDef:
    """
    Definition of an operation parameter.

    Used for validation and documentation.
    """
    name: str
    type: str  # "number" or "bool"
    required: bool = True
    default: Any = None
    description: str = ""

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate a value against this parameter definition."""
        if value is None:
            if self.required:
                return False, f"Parameter '{self.name}' is required"
            return True, ""

        if self.type == "number" and not is_number(value):
            return False, f"Parameter '{self.name}' must be a real number, got {value!r}"
        if self.type == "bool" and not isinstance(value, (bool, np.bool_)):
            return False, f"Parameter '{self.name}' must be a bool, got {value!r}"

        return True, ""


# =============================================================================
# Operation Info
# =============================================================================

@dataclass
class OperationInfo:
    """
    Metadata about an operation.

    Registered with the operation for documentation and validation.
    """
    name: str
    description: str
    params: list[ParamDef] = field(default_factory=list)
    may_change_length: bool = False
    has_async_variant: bool = True


# =============================================================================
# Operation Base Class
# =============================================================================

class Operation(ABC):
    """
    Abstract base class for all operations.

    Every operation must implement:
    - apply(values, params) -> pd.Series
    - info() -> OperationInfo (class method)

    Example:
        @register_operation
        class Negate(Operation):
            @classmethod
            def info(cls) -> OperationInfo:
                return OperationInfo(name="negate", description="Flip signs")

            def apply(self, values, params):
                return -values
    """

    @classmethod
    @abstractmethod
    def info(cls) -> OperationInfo:
        """Return metadata about this operation."""
        pass

    @abstractmethod
    def apply(self, values: pd.Series, params: dict[str, Any]) -> pd.Series:
        """
        Apply this operation to a Series.

        Args:
            values: Input Series (will not be modified)
            params: Validated parameters

        Returns:
            A new Series holding the transformed values
        """
        pass

    def resolve_params(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Fill in defaults for optional parameters that were not given.

        Integer numbers (numpy ints included) become Python ints.
        """
        resolved = dict(params)
        for param_def in self.info().params:
            value = resolved.get(param_def.name)
            if value is None and not param_def.required:
                resolved[param_def.name] = param_def.default
            elif param_def.type == "number" and isinstance(value, numbers.Integral):
                resolved[param_def.name] = int(value)
        return resolved

    def validate_params(self, params: dict[str, Any]) -> tuple[bool, list[str]]:
        """Validate parameters against the operation's param definitions."""
        errors = []
        known = {p.name for p in self.info().params}
        for name in params:
            if name not in known:
                errors.append(f"Unexpected parameter '{name}'")
        for param_def in self.info().params:
            value = params.get(param_def.name, param_def.default)
            valid, error = param_def.validate(value)
            if not valid:
                errors.append(error)
        return len(errors) == 0, errors
