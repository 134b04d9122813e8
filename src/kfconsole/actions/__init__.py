"""
Action handler mixins for kfconsole.

This package contains input handlers organized by domain.
These are mixed into InputDispatcher via multiple inheritance.
"""

from .navigation import NavigationActionsMixin
from .selection import SelectionActionsMixin
from .forwarding import ForwardingActionsMixin
from .popups import PopupActionsMixin
from .files import FileActionsMixin

__all__ = [
    "NavigationActionsMixin",
    "SelectionActionsMixin",
    "ForwardingActionsMixin",
    "PopupActionsMixin",
    "FileActionsMixin",
]
