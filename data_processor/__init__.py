# =============================================================================
# data_processor - Chainable Numeric Data Processor
# =============================================================================
# A small fluent library for transforming a sequence of numbers.
#
# Key principles:
# - Every operation is deterministic (same input = same output)
# - Every transformation returns the processor itself, so calls chain
# - Async variants only add a delay, never change the result
# - Inputs are copied in and results are copied out
#
# Usage:
#   from data_processor import create_processor
#
#   create_processor([5, 10, 15, 20, 25]) \
#       .add(5).multiply(2).filter_greater_than(35).sort(False) \
#       .get_result()
#   # [60, 50, 40]
# =============================================================================

from data_processor.registry import (
    register_operation,
    get_operation,
    list_operations,
    get_operation_info,
    OPERATION_REGISTRY,
)
from data_processor.types import Operation, OperationInfo, ParamDef

# Import operations to register them
# This must come after registry imports
from data_processor import operations  # noqa: F401, E402

from data_processor.processor import (
    DataProcessor,
    create_processor,
    create_processor_async,
)
from data_processor.engine import Engine, ExecutionResult, PlanStep, StepResult
from data_processor.exceptions import (
    ProcessorError,
    InvalidValueError,
    InvalidParamsError,
    InvalidDelayError,
    UnknownOperationError,
)

__version__ = "1.0.0"

__all__ = [
    # Processor
    "DataProcessor",
    "create_processor",
    "create_processor_async",
    # Registry
    "register_operation",
    "get_operation",
    "list_operations",
    "get_operation_info",
    "OPERATION_REGISTRY",
    # Engine
    "Engine",
    "ExecutionResult",
    "PlanStep",
    "StepResult",
    # Types
    "Operation",
    "OperationInfo",
    "ParamDef",
    # Errors
    "ProcessorError",
    "InvalidValueError",
    "InvalidParamsError",
    "InvalidDelayError",
    "UnknownOperationError",
]
