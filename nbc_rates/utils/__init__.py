"""Shared helpers for :mod:`nbc_rates`."""
