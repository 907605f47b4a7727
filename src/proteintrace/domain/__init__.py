"""Domain models and lookup tables for decoded structures."""
