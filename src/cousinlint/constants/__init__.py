"""Constant tables shared across Cousinlint modules."""
