# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Uploads product images under time-stamped names and deletes them by their
# public URL. No retries and no dedup: one call, one storage request.
# =============================================================================

import logging

from app.config import settings
from app.exceptions import StorageError
from core.models.image import ImageFile
from lib.supabase_client import SupabaseClient
from lib.utils import last_path_segment, timestamped_name

logger = logging.getLogger(__name__)


class StorageService:
    """
    Service for product image storage.

    Objects live flat in settings.STORAGE_BUCKET; the object name is the
    last segment of the public URL stored on the product row.
    """

    @staticmethod
    def _bucket():
        client = SupabaseClient.get_client()
        return client.storage.from_(settings.STORAGE_BUCKET)

    @staticmethod
    def upload_image(image: ImageFile) -> str:
        """
        Upload an image and return its public URL.

        Args:
            image: Validated image file

        Returns:
            Public URL of the stored object

        Raises:
            StorageError: If the upload fails or stores nothing
        """
        name = timestamped_name(image.filename)

        try:
            response = StorageService._bucket().upload(
                path=name,
                file=image.content,
                file_options={
                    "cache-control": str(settings.IMAGE_CACHE_CONTROL_SECONDS),
                    "content-type": image.content_type,
                },
            )
        except Exception as e:
            logger.error(f"Storage upload failed: {e}")
            raise StorageError(f"Image upload failed: {e}", path=name)

        if not getattr(response, "path", None):
            logger.error(f"Storage upload returned no object for {name}")
            raise StorageError("Image upload failed", path=name)

        logger.info(f"Uploaded image to storage: {name}")
        return StorageService._bucket().get_public_url(name)

    @staticmethod
    def delete_image(url: str) -> bool:
        """
        Delete the object referenced by a public URL.

        Removing an object that no longer exists is not an error.

        Args:
            url: Public URL previously returned by upload_image

        Returns:
            True if an object was removed, False if there was none

        Raises:
            StorageError: If the URL has no object name or the request fails
        """
        name = last_path_segment(url or "")
        if not name:
            raise StorageError("Invalid URL", path=url)

        try:
            removed = StorageService._bucket().remove([name])
        except Exception as e:
            logger.error(f"Failed to delete image {name}: {e}")
            raise StorageError(f"Image delete failed: {e}", path=name)

        if not removed:
            logger.info(f"Image already absent from storage: {name}")
            return False

        logger.info(f"Deleted image from storage: {name}")
        return True
