"""
Endpoint modules, one APIRouter per resource (auth, players, coaches,
schedule).  They are aggregated in ``api/router.py``.
"""
