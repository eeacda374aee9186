# backend/models/responses.py

from typing import Dict, List

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class DataResponse(BaseModel):
    data: List[Dict[str, str]]
