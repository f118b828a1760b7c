"""Declarative content and shared helpers."""
