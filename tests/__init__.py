"""
Test suite for the RSA arithmetic core

Contains:
- tests/unit/          : Unit tests for core math, domain models, contracts and the driver
"""
