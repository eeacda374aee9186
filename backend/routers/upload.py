# backend/routers/upload.py

import logging
from typing import Union

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from middleware.payload_size_limit import TOO_LARGE_MESSAGE
from models.responses import MessageResponse
from routers.dependencies import get_settings, get_store
from services.csv_parser import CSVParseError, EmptyFileError, NoRecordsError
from services.ingest import FileTooLargeError, ingest_csv
from utils.data_store import DataStore
from utils.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Files"])

CSV_CONTENT_TYPE = "text/csv"


@router.post("/files", response_model=MessageResponse)
async def upload_csv(
    file: Union[UploadFile, str, None] = File(None),
    store: DataStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Accepts a CSV in the `file` form field and replaces the in-memory dataset
    with its rows. The header row supplies the column names.
    """
    # a plain text field named `file` is not an upload
    if not isinstance(file, StarletteUploadFile):
        raise HTTPException(status_code=400, detail="A file must be provided")

    # browsers send an empty, nameless part when no file was picked
    if not file.filename and not file.size:
        raise HTTPException(status_code=400, detail="A file must be provided")

    if file.content_type != CSV_CONTENT_TYPE:
        raise HTTPException(status_code=400, detail="The file type must be CSV")

    try:
        content = await file.read()
    finally:
        await file.close()

    try:
        # parsing and the store lock stay off the event loop
        await run_in_threadpool(ingest_csv, store, content, settings.max_upload_bytes)
    except EmptyFileError:
        raise HTTPException(status_code=400, detail="The file must not be empty")
    except NoRecordsError:
        raise HTTPException(status_code=400, detail="Send a file with records")
    except FileTooLargeError as e:
        logger.warning("upload rejected: %s", e)
        raise HTTPException(status_code=413, detail=TOO_LARGE_MESSAGE)
    except CSVParseError as e:
        # never echo parser details back to the client
        logger.error("csv parse failed filename=%r: %s", file.filename, e)
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"message": "File uploaded successfully"}
