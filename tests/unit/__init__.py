"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_handler_resolver.py: Distance mode, named mode, tie-breaking
    - test_handler_index.py: Eligibility and result-type filtering
    - test_recovery_handler.py: recover() entry point
    - test_config_loader.py: Configuration loading/validation
"""
