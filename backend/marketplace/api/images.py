"""Image API endpoints"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ..services.image_store import ImageStore
from ..utils.dependencies import get_image_store

router = APIRouter()


@router.get("/{image_filename}", response_class=FileResponse)
def get_image(image_filename: str, images: ImageStore = Depends(get_image_store)):
    """Serve a stored image, or the default image when it is missing"""

    return FileResponse(images.resolve(image_filename))
