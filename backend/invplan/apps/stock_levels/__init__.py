"""
Stock levels module.

Monthly min/max stock targets per size: parsing, validation and defaults.
"""

from .router import router  # noqa: F401
from . import schemas  # noqa: F401
