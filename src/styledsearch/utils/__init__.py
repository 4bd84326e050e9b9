"""Utility helpers for styledsearch."""
