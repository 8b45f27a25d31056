"""Route modules, one per group of functions."""
