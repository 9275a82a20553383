"""Diagnostics package.

Light-weight self checks runnable from the command line (`ethiocal diag ...`).
"""

__all__ = ["round_trip"]
