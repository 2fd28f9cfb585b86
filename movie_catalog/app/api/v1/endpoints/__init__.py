"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for a specific
domain (catalog, movies, ratings).  The routers are assembled per
service in ``router.py`` at the package level and then included in
the application built for that service.
"""
