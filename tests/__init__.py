"""
Test suite for max-product-subrange

Contains:
- tests/unit/     : Unit tests for individual modules
- tests/oracles.py: Brute-force reference algorithms for differential tests
"""
