"""
HTTP routes.

``router`` aggregates the per‑domain routers from ``endpoints``; the
application mounts it under ``/api``.
"""
