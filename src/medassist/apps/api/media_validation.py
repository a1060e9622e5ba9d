"""Validation helpers for uploaded report and scan images."""

from fastapi import HTTPException, UploadFile

from medassist.core.actions.schemas import UploadedFile

ALLOWED_IMAGE_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/heic",
    "image/heif",
    "image/webp",
}

_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".heic", ".heif", ".webp")


def validate_image_file(image_file: UploadFile) -> None:
    """Reject uploads that the image picker would never produce.

    The content type wins when present; the filename extension is only
    consulted when the client omitted it.
    """
    if not image_file.filename:
        raise HTTPException(status_code=400, detail="Image file must have a filename.")
    if image_file.content_type:
        content_type = image_file.content_type.lower().split(";", 1)[0].strip()
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise HTTPException(status_code=415, detail=f"Unsupported image content type: {image_file.content_type}")
    elif not image_file.filename.lower().endswith(_IMAGE_EXTENSIONS):
        raise HTTPException(status_code=415, detail="Unsupported or missing image content type.")


async def read_image_handle(image_file: UploadFile) -> UploadedFile:
    """Validate the upload and return the file handle stored on the pending record."""
    validate_image_file(image_file)
    image_bytes = await image_file.read()
    if not image_bytes:
        raise HTTPException(status_code=400, detail="Uploaded image file is empty.")
    return UploadedFile(
        filename=image_file.filename or "",
        content_type=(image_file.content_type or "application/octet-stream").split(";", 1)[0].strip(),
        size_bytes=len(image_bytes),
    )
