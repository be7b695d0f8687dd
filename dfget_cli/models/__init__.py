"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: the run context and the host properties.
"""

from .context import RunContext
from .properties import DfgetProperties

__all__ = ["DfgetProperties", "RunContext"]
