"""
Domain models for pakt.

    from pakt.core.models import ManagerSpec, PackageAction, CommandChain, TrackingStore, Receipt
"""

from pakt.core.models.command import CommandChain, CommandSegment
from pakt.core.models.manager import ManagerSpec, PackageAction
from pakt.core.models.receipt import Receipt
from pakt.core.models.store import TrackingStore

__all__ = [
    # command.py
    "CommandChain",
    "CommandSegment",
    # manager.py
    "ManagerSpec",
    "PackageAction",
    # receipt.py
    "Receipt",
    # store.py
    "TrackingStore",
]
