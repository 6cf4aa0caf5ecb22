"""
Material planning module.

Resolves stock thresholds per SKU and flags low, critical and overstocked
inventory.
"""

from .router import router  # noqa: F401
