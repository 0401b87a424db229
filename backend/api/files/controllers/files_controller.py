"""Files controller — read, create, update and archive nodes under /file."""

import logging
import mimetypes

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from config import MAX_UPLOAD_SIZE
from api.files.dto.file import DirectoryListing
from api.files.exceptions import (
    ConflictError,
    FileStoreError,
    NotFoundError,
    ValidationError,
)
from api.files.repositories.files_repository import FilesRepository, get_files_repository
from api.files.services import files_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/file", tags=["Files"])

ERROR_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
}


def _to_http(e: FileStoreError) -> HTTPException:
    status_code = ERROR_STATUS.get(type(e), 500)
    if status_code == 500:
        logger.error("File store failure: %s", e, exc_info=e)
    return HTTPException(status_code=status_code, detail=str(e))


async def _read_upload(file: UploadFile) -> bytes:
    content = await file.read(MAX_UPLOAD_SIZE + 1)
    if len(content) > MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413, detail=f"File exceeds max size of {MAX_UPLOAD_SIZE} bytes"
        )
    return content


@router.get("")
@router.get("/{path:path}")
async def read(
    path: str = "",
    filter_by_name: str | None = Query(None, alias="filterByName"),
    order_by: str | None = Query(None, alias="orderBy"),
    order_direction: str | None = Query(None, alias="orderDirection"),
    repo: FilesRepository = Depends(get_files_repository),
):
    """Return raw file content, or the names in a directory."""
    try:
        result = await run_in_threadpool(
            files_service.read_path, repo, path, filter_by_name, order_by, order_direction
        )
    except FileStoreError as e:
        raise _to_http(e)

    if isinstance(result, DirectoryListing):
        return result.model_dump(by_alias=True)

    content_type, _ = mimetypes.guess_type(result.file_name)
    return Response(content=result.content, media_type=content_type or "application/octet-stream")


@router.post("/{path:path}")
async def create(
    path: str,
    file: UploadFile = File(...),
    repo: FilesRepository = Depends(get_files_repository),
):
    content = await _read_upload(file)
    try:
        await run_in_threadpool(files_service.create_file, repo, path, content)
    except FileStoreError as e:
        raise _to_http(e)
    return {}


@router.patch("/{path:path}")
async def update(
    path: str,
    file: UploadFile = File(...),
    repo: FilesRepository = Depends(get_files_repository),
):
    content = await _read_upload(file)
    try:
        await run_in_threadpool(files_service.update_file, repo, path, content)
    except FileStoreError as e:
        raise _to_http(e)
    return {}


@router.delete("/{path:path}")
async def archive(path: str, repo: FilesRepository = Depends(get_files_repository)):
    """Archive a file; the row is kept but never read again."""
    try:
        await run_in_threadpool(files_service.archive_file, repo, path)
    except FileStoreError as e:
        raise _to_http(e)
    return {}
