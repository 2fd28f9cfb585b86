"""
Application package initializer.

This package contains the application factory and all of its
submodules.  The code is organised into logical pieces: ``core``
holds configuration, logging, the error taxonomy and the outbound HTTP
client; ``schemas`` defines the wire format; ``services`` implements
the rating source, the movie info sources and the catalog aggregator;
``api`` exposes them through versioned routers.
"""

from .main import app  # noqa: F401
