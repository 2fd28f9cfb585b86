"""
Endpoint subpackage for API v2.
"""
