"""Utility helpers shared across initkit."""
