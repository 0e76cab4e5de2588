"""Presentation layers."""
