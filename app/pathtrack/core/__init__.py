"""Core building blocks for pathtrack.

Paths, settings, theme, path resolution and the error hierarchy.
"""
