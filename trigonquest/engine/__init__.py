"""Interactive drawing engine"""

from .session import DrawingSession

__all__ = ["DrawingSession"]
