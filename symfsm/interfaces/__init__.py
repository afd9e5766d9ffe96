"""Type aliases shared by the core modules."""
