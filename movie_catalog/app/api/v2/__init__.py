"""
Version 2 of the API, mounted under ``/v2``.

Holds endpoints whose response shape changed incompatibly compared to
v1, currently the enveloped user ratings.
"""
