"""Infrastructure helpers shared across features."""
