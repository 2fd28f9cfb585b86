"""
Service layer abstraction.

Each service encapsulates the logic of one domain.  Rating and movie
sources are plain classes with a single lookup method; local and
remote implementations are interchangeable so the catalog can be wired
against either without changing the API handlers.
"""
