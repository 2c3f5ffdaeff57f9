"""order-core - Order aggregate lifecycle and pricing rules."""

__version__ = "0.1.0"
