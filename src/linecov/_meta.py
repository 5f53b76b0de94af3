from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("linecov")

logger = logging.getLogger("linecov")

__all__ = ["__version__", "logger"]
