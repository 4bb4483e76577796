"""Core domain logic for crumb: config, entries, and the index."""
