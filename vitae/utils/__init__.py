"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logger setup
- Editor event logging
- Timestamps
"""

from vitae.utils.timestamp import now_exact

__all__ = ["now_exact"]
