"""Ports (interfaces) for the scroller.

This module contains Protocol definitions that define the boundary between
the scroller core and the host that renders its items.
"""

from src.ports.host import ItemHost

__all__ = ["ItemHost"]
