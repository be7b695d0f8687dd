"""
Core startup logic.

`new_context` builds a fresh `RunContext` with its identity filled in, and
`assert_context` drives the field validators in a fixed order before any
transfer is allowed to start.
"""

from .context import assert_context, new_context
from .sign import generate_sign

__all__ = ["assert_context", "generate_sign", "new_context"]
