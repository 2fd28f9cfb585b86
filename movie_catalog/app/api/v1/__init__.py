"""
Version 1 of the API.

This subpackage bundles the original endpoints of the three services,
served at the root of each service.  Breaking changes are introduced
in new version subpackages (e.g. ``v2``) to preserve backwards
compatibility.
"""
