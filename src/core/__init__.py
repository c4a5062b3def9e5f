"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of any driver or I/O: integer kinds, modular arithmetic, key models and
JSON contracts.
"""
