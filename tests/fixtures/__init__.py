"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - errors.py: A small exception hierarchy with known distances

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""
