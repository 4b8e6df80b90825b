"""Static data — the package manager catalog and distro table."""
