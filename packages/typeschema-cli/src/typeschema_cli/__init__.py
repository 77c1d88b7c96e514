"""typeschema-cli: Command line interface for typeschema.

Provides the ``typeschema`` command for deriving and exporting JSON Schema
from importable Python types.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
