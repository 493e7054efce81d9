"""Indexed record storage.

This module holds the ordered record collection and its hash index.
It powers exact-match lookup for the SDK and the benchmark driver.
"""
