"""Benchmarks for collext developments, run with `python -m benchmarks`."""
