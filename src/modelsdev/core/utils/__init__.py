"""Utility helpers for the core module."""
