"""
Domain models and value objects.

Contains integer kinds for fixed-width arithmetic and RSA key material.
"""

from src.core.domain.int_kind import (
    INT8,
    INT16,
    INT32,
    INT64,
    INT_KINDS,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntKind,
    OverflowPolicy,
    parse_int_kind,
)
from src.core.domain.keys import (
    RSAExchange,
    RSAKeyPair,
    RSAPrivateKey,
    RSAPublicKey,
)

__all__ = [
    # Integer kinds
    "IntKind",
    "OverflowPolicy",
    "INT8",
    "UINT8",
    "INT16",
    "UINT16",
    "INT32",
    "UINT32",
    "INT64",
    "UINT64",
    "INT_KINDS",
    "parse_int_kind",
    # Keys
    "RSAPublicKey",
    "RSAPrivateKey",
    "RSAKeyPair",
    "RSAExchange",
]
