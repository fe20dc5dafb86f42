"""GestPro: multi-tenant invoicing, stock and sales."""

__version__ = "1.0.0"
