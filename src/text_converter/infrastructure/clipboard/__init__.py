"""Clipboard adapters."""
