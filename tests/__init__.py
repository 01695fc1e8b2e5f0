"""
Test package for tidy-style.

This package contains tests including:
- Unit tests for individual components
- Integration tests for complete runs and the CLI
- Property-based tests using Hypothesis
"""
