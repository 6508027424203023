"""Storefront: catalog and order API with simulated network instability."""

__version__ = "1.0.0"
