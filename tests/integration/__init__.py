"""
Integration Tests - Retry and Recovery Working Together.

These tests drive @retryable methods on real classes and check that the
right @recover handler runs once retries are exhausted.

Test Files:
    - test_retryable_recovery.py: Full retry -> recover workflow
"""
