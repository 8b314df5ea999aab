# FILE: gift_exchange/__init__.py
"""
gift_exchange package: rule set builder, randomized draw engine, models, IO, and validation.
"""
__all__ = [
    "constants",
    "models",
    "rules",
    "engine",
    "aliases",
    "io",
    "config",
    "validation",
    "exchange",
    "cli",
]
