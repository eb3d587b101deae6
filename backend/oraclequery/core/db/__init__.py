"""
Oracle connection helpers: one connection per request, no pooling.
"""

from .oracle import close_quietly, connect, cursor_to_dicts, execute, init_driver

__all__ = [
    "connect",
    "execute",
    "cursor_to_dicts",
    "close_quietly",
    "init_driver",
]
