# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for data_processor:
# - test_processor.py: Sync chaining, copy semantics, validation
# - test_processor_async.py: Async variants, factories, parallel chains
# - test_operations.py: Operation registry and parameter validation
# - test_engine.py: Plan execution engine
# - test_config.py: Settings defaults and overrides
#
# Run tests with: pytest
# =============================================================================
