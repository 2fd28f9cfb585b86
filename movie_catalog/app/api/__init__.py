"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``.  A
version subpackage exposes a ``SERVICE_ROUTERS`` table mapping each
service name to the router holding its endpoints.
"""
