"""
Navitas Gateway - Partner Authentication & Request Signing Service

A FastAPI-based middleware that authenticates partner callers and
forwards their locality lookups and credit applications to the
Navitas Credit API with HMAC-SHA256 request signing.
"""

__version__ = "1.0.0"
