"""Domain layer for the optional-value package.

This package contains the container type and the pure functions that
operate on it, independent of configuration and logging setup.
"""
