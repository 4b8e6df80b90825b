"""pakt — track and sync packages installed through native package managers."""

__version__ = "0.1.0"
