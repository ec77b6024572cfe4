"""
Shared utilities for the transition engine.

This package aggregates the ambient building blocks used around engines:

- config: Settings via pydantic-settings
- logging: Structured logging with run correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses

Do not import from transition_engine into shared/.
"""
