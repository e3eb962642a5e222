"""
HTTP layer.

``router`` aggregates one APIRouter per resource from ``endpoints``;
the application mounts it under ``/api``.
"""
