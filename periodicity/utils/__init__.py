# File: utils/__init__.py
"""Pure Python utilities for the periodicity engines.

Submodules:
    - dt_utils: Default zone, day boundaries, recurrence anchors, cycle
      arithmetic, parsing and formatting

Usage:
    from . import dt_utils
    from .dt_utils import start_of_day
"""

from . import dt_utils

__all__ = ["dt_utils"]
