"""Benchmark and demonstration drivers.

This module exercises the indexed store through its public operations
and reports timing and hit statistics.
"""
