from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import FileResponse

from config.settings import settings
from models.errors import BadRequest, NotFound
from storage.uploads import resolve_upload, save_upload

log = logging.getLogger("storefront.routers.uploads")

router = APIRouter()
static_router = APIRouter()


@router.post("/upload", status_code=201)
def upload(request: Request, file: Optional[UploadFile] = File(default=None)):
    if file is None:
        raise BadRequest("file required")
    filename = save_upload(file.file, file.filename or "", settings.upload_dir)
    relative = f"/uploads/{filename}"
    host = request.headers.get("x-forwarded-host") or request.headers.get("host") or request.url.netloc
    origin = f"{request.url.scheme}://{host}"
    log.info("upload_stored", extra={"extra": {"event": "upload_stored", "file_name": filename}})
    return {"url": f"{origin}{relative}", "relative": relative}


@static_router.get("/uploads/{filename}")
def serve_upload(filename: str):
    path = resolve_upload(filename, settings.upload_dir)
    if not path:
        raise NotFound("not found")
    return FileResponse(path)
