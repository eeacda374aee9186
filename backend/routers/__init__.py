# backend/routers/__init__.py

from .upload import router as upload_router
from .users import router as users_router
