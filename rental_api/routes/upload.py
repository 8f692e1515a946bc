from typing import List, Optional, Union
from fastapi import APIRouter, Depends, File, Request, Response, UploadFile, status
from fastapi.responses import FileResponse
from rental_api.dependencies import get_file_store, get_upload_service
from rental_api.errors import AppError, ServerError
from rental_api.logger import get_logger
from rental_api.uploads import FileStore, UploadService

router = APIRouter()
files_router = APIRouter()
logger = get_logger("routes.uploads")


@router.post("/upload")
async def upload_image(
    image: Union[UploadFile, str, None] = File(None),
    service: UploadService = Depends(get_upload_service),
):
    try:
        image_url = await service.upload_single(image)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error uploading file")
        raise ServerError("Error uploading file", str(e)) from e
    return {"imageUrl": image_url}


@router.post("/upload-multiple")
async def upload_images(
    images: Optional[List[UploadFile]] = File(None),
    service: UploadService = Depends(get_upload_service),
):
    try:
        image_urls = await service.upload_many(images)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error uploading files")
        raise ServerError("Error uploading files", str(e)) from e
    return {"imageUrls": image_urls}


@files_router.api_route("/uploads/{filename}", methods=["GET", "HEAD"])
async def serve_upload(filename: str, request: Request, store: FileStore = Depends(get_file_store)):
    path = store.path_for(filename)
    return FileResponse(path, headers=store.serving_headers(request.headers.get("origin")))


@files_router.options("/uploads/{filename}")
async def upload_options(filename: str, request: Request, store: FileStore = Depends(get_file_store)):
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=store.serving_headers(request.headers.get("origin")),
    )
