"""User interfaces for coverfit."""
