"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks shared by the
max-product algorithms: numeric domains, runs and index ranges,
numerical safeguards and JSON result contracts.
"""
