"""Services — composer, detection and manager selection."""
