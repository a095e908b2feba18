"""VAQMAS clinic backend: public vaccine catalog, admin API and admin-claim callable."""

__version__ = "0.1.0"
