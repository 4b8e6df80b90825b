"""Persistence — the tracking store file."""
