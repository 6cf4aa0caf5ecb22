"""
Capacity module.

Splits a class's total production capacity across its sizes using the
configured size ratios.
"""

from .router import router  # noqa: F401
