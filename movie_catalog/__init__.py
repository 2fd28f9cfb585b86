"""
Top‑level package for the movie catalog services.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
