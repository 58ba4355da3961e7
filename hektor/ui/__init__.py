"""
Terminal-facing pieces of Hektor: key dispatch and screen drawing.
"""
from hektor.ui import input, screen  # noqa: F401
