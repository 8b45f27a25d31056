"""Pharmanet platform functions served from one Vercel Python function.

`api.index` exposes the FastAPI app; `routes` holds the key, upload and
security-log functions and `utils` the Supabase and Brevo adapters they use.
"""

__all__ = []
