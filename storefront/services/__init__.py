"""Shared services for the storefront core."""
