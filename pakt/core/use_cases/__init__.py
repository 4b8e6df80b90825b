"""Use cases — one module per CLI verb, each returning a result object."""
