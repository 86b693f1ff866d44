"""
Mask Module
===========

Persistent frequency mask painted through pointer events.
"""

from spectramask.mask.store import MaskStore, PASSED, SUPPRESSED

__all__ = [
    "MaskStore",
    "PASSED",
    "SUPPRESSED",
]
