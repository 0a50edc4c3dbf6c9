"""
Elp git helper.

Wraps the everyday git workflow (init and link a remote, add/commit/push,
pull) so each cycle takes a single command instead of several.
"""

__version__ = "1.0.0"

__all__ = ["config", "workflow"]
