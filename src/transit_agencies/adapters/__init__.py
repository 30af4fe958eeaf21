"""Adapters: built-in agency catalog and configuration loading."""
