"""Utility helpers for md2json."""
