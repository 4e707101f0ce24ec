"""Saved-filter engine for the ERP administration front-end."""

__version__ = "1.0.0"
