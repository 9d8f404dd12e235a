"""
iprouter datastructures.

- Address: IPv4 network address with prefix-masked containment
"""

from __future__ import annotations

from .address import Address, is_decimal, mask_from_prefix

__all__ = ["Address", "is_decimal", "mask_from_prefix"]
