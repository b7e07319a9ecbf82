"""
Test Suite for Recovery Resolver.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Decorated classes recovering end to end
    - fixtures/: Shared exception hierarchy and sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/recovery_resolver      # With coverage
"""
