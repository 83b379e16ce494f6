"""Adapters that persist domain objects: JSON collection files and their repositories."""
