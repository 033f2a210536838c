"""
Identifier and token generation.

Every entity ID and opaque token in the API has the form
``<prefix>-<16 lowercase hex characters>``.  The hex part comes from
8 bytes of the operating system's cryptographically strong random
source.  Uniqueness is not checked here; the store rejects the rare
collision on insert.
"""

import secrets

ID_RANDOM_BYTES = 8


def generate_id(prefix: str) -> str:
    """Return a new identifier such as ``user-9f86d081884c7d65``."""
    return f"{prefix}-{secrets.token_hex(ID_RANDOM_BYTES)}"
