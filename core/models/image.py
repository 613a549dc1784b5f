# =============================================================================
# core/models/image.py - Image Upload Schemas
# =============================================================================
# - ImageFile: An uploaded file, detached from the web framework
# - ImageInput: Validation schema for the product image form field
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.config import settings

ACCEPTED_TYPE_PREFIXES = ("image/",)


class ImageFile(BaseModel):
    """An uploaded file: name, declared content type and raw bytes."""

    filename: str
    content_type: str = ""
    content: bytes = b""

    @property
    def size(self) -> int:
        return len(self.content)


class ImageInput(BaseModel):
    """
    Validation schema for an image upload.

    Rules:
    - a file must be present
    - at most settings.MAX_IMAGE_SIZE_MB megabytes
    - declared content type starts with "image/"
    """

    image: ImageFile = Field(default=None, validate_default=True)

    @field_validator("image", mode="before")
    @classmethod
    def require_file(cls, value: Any) -> Any:
        if value is None or value == "":
            raise ValueError("image file is required")
        return value

    @field_validator("image")
    @classmethod
    def check_image(cls, image: ImageFile) -> ImageFile:
        problems = []
        if image.size > settings.max_image_size_bytes:
            problems.append(f"File size must be less than {settings.MAX_IMAGE_SIZE_MB}MB")
        if not image.content_type.startswith(ACCEPTED_TYPE_PREFIXES):
            problems.append("File must be an image")
        if problems:
            raise ValueError(", ".join(problems))
        return image
