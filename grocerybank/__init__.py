"""Grocery checkout with shopping carts, currencies and bank accounts."""

__version__ = "0.1.0"

__all__ = ["bank", "cli", "currency", "item", "shop"]