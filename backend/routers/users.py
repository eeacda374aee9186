# backend/routers/users.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from models.responses import DataResponse
from routers.dependencies import get_store
from services.search import NoDataError, search_records
from utils.data_store import DataStore

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/users", response_model=DataResponse)
def list_users(q: Optional[str] = None, store: DataStore = Depends(get_store)):
    """
    Returns the uploaded rows. With `q`, only rows where some value contains
    `q` (case-insensitive) are returned.
    Example:
    /api/users?q=ana
    """
    try:
        records = search_records(store, q)
    except NoDataError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"data": records}
