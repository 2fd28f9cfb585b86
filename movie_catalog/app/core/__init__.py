"""
Cross‑cutting infrastructure: settings, logging, errors and the
outbound HTTP client.
"""
