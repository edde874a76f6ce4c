"""Widgets Qt del validador."""
