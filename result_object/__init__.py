from __future__ import annotations

import logging
from importlib.metadata import version, PackageNotFoundError

from . import codes
from .models import Errors, Result

try:
    __version__ = version("result-object")
except PackageNotFoundError:
    __version__ = "development"

# Silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Errors", "Result", "codes", "__version__"]
