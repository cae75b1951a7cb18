from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile

from articles_api.dependencies import get_s3_file_provider
from articles_api.exceptions import InvalidOperationError
from articles_api.schemas import S3ObjectList, S3UploadResponse
from articles_api.services.s3_file_provider import S3FileProvider

router = APIRouter(prefix="/api/articles/s3", tags=["object-storage"])


def _require_key(key: str) -> str:
    key = key.strip()
    if not key:
        raise InvalidOperationError("Object key is required")
    return key


@router.post("/upload", status_code=201, response_model=S3UploadResponse)
async def upload_file(
    file: UploadFile = File(...),
    key: str = Form(...),
    provider: S3FileProvider = Depends(get_s3_file_provider),
):
    key = _require_key(key)
    data = await file.read()
    size = await provider.upload(key, data, file.content_type)
    return S3UploadResponse(key=key, size=size)


@router.get("/download")
async def download_file(
    key: str = Query(...),
    provider: S3FileProvider = Depends(get_s3_file_provider),
):
    key = _require_key(key)
    data = await provider.download(key)
    filename = key.rsplit("/", 1)[-1]
    return Response(
        content=data,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/list", response_model=S3ObjectList)
async def list_files(
    prefix: str | None = Query(None),
    provider: S3FileProvider = Depends(get_s3_file_provider),
):
    keys = await provider.list_objects(prefix)
    return S3ObjectList(prefix=prefix, keys=keys)


@router.delete("/delete", status_code=204)
async def delete_file(
    key: str = Query(...),
    provider: S3FileProvider = Depends(get_s3_file_provider),
):
    await provider.delete(_require_key(key))
