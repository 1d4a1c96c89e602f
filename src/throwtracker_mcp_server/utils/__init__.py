"""Shared helpers: types, dates, validation, formatting and export."""
