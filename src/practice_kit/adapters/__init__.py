"""Adapters for rendering results."""
