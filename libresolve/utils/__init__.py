"""Utility helpers for the libresolve CLI."""
