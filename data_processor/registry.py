# =============================================================================
# data_processor/registry.py - Operation Registry
# =============================================================================
# Operations register themselves here by name at import time. The processor
# and the engine both resolve names through this table, and list_operations()
# can narrow it to the operations that have a delayed (async) variant.
# =============================================================================

from __future__ import annotations

from typing import Type

from data_processor.types import Operation, OperationInfo


# Global registry: name -> Operation class
OPERATION_REGISTRY: dict[str, Type[Operation]] = {}


def register_operation(cls: Type[Operation]) -> Type[Operation]:
    """
    Decorator to register an operation class.

    Usage:
        @register_operation
        class Add(Operation):
            ...

    The operation will be registered under its info().name.
    """
    name = cls.info().name

    if name in OPERATION_REGISTRY:
        raise ValueError(f"Operation '{name}' is already registered")

    OPERATION_REGISTRY[name] = cls
    return cls


def get_operation(name: str) -> Type[Operation] | None:
    """Get an operation class by name."""
    return OPERATION_REGISTRY.get(name)


def list_operations(async_only: bool = False) -> list[str]:
    """
    List all registered operation names.

    Args:
        async_only: If True, only list operations with a suspending variant
    """
    if not async_only:
        return list(OPERATION_REGISTRY.keys())

    return [
        name for name, cls in OPERATION_REGISTRY.items()
        if cls.info().has_async_variant
    ]


def get_operation_info(name: str) -> OperationInfo | None:
    """Get metadata about an operation."""
    cls = OPERATION_REGISTRY.get(name)
    if cls is None:
        return None
    return cls.info()
