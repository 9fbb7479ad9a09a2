# routes_root.py
"""
Root / basic endpoints (health).
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def read_root():
    """
    Simple health check endpoint.
    """
    return {"message": "Finance ledger API is running"}
