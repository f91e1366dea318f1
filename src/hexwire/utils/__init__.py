"""Input coercion utilities."""
