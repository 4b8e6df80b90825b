"""Configuration — config.yml and the per-user file locations."""
