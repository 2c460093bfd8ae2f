"""
Unit Tests for MeanMate

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_evaluation.py

    # Run with coverage
    pytest tests/ --cov=meanmate --cov-report=html

    # Run specific test
    pytest tests/test_aggregate.py::TestAggregate::test_mean_of_two

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
