# jobboard/services/storage.py
import io
import logging
import time

import cloudinary
import cloudinary.uploader
import cloudinary.utils
from cloudinary.exceptions import Error as CloudinaryError

from jobboard.errors import StorageError

logger = logging.getLogger(__name__)


class ResumeStorage:
    """
    Thin wrapper around Cloudinary for resume PDFs.

    Files go up as private "raw" resources, so the only way to read them back
    is through a signed, expiring download URL.
    """

    folder = "resumes"
    file_format = "pdf"

    def __init__(self, app=None):
        self.configured = False
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        cloudinary.config(
            cloud_name=app.config.get("CLOUDINARY_CLOUD_NAME"),
            api_key=app.config.get("CLOUDINARY_API_KEY"),
            api_secret=app.config.get("CLOUDINARY_API_SECRET"),
            secure=True,
        )
        self.configured = bool(app.config.get("CLOUDINARY_CLOUD_NAME"))
        app.extensions["resume_storage"] = self

    @staticmethod
    def make_public_id(candidate_id):
        return f"{candidate_id}_{int(time.time() * 1000)}"

    def upload(self, data: bytes, public_id: str) -> str:
        """Upload raw bytes and return the locator needed to sign URLs later."""
        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                resource_type="raw",
                folder=self.folder,
                type="private",
                public_id=public_id,
                format=self.file_format,
                access_mode="authenticated",
            )
        except CloudinaryError as e:
            logger.error(f"❌ Cloudinary upload failed for {public_id}: {e}")
            raise StorageError("Cloudinary upload failed") from e

        logger.info(f"✅ Cloudinary upload ok: {result.get('public_id')}")
        return result["public_id"]

    def signed_url(self, locator: str, expires_in: int = 3600) -> str:
        return cloudinary.utils.private_download_url(
            locator,
            self.file_format,
            resource_type="raw",
            type="private",
            expires_at=int(time.time()) + expires_in,
            attachment=False,
        )
