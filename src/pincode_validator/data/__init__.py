"""Reference data access."""
