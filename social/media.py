"""Image hosting through Django's storage backend."""

import base64
import binascii
import logging
import re
import uuid
from pathlib import PurePosixPath

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from social.errors import ValidationFailed

logger = logging.getLogger(__name__)

DATA_URI_RE = re.compile(r"^data:image/(?P<ext>[a-zA-Z0-9.+-]+);base64,(?P<data>.+)$", re.DOTALL)
IMAGE_EXTENSIONS = ("png", "jpg", "gif", "webp", "svg", "bmp", "tiff", "avif")
EXTENSION_ALIASES = {"jpeg": "jpg", "svg+xml": "svg", "tif": "tiff"}


def public_id_from_url(url):
    """Return the hosted image id encoded in its URL (last segment, no extension)."""
    if not url:
        return ""
    return PurePosixPath(url.split("?", 1)[0]).stem


class MediaHost:
    """Upload and destroy hosted images; empty input is a no-op."""

    def __init__(self, storage=None, upload_dir=None):
        self.storage = storage or default_storage
        self.upload_dir = upload_dir or settings.SOCIAL_MEDIA_UPLOAD_DIR

    def _decode(self, data):
        match = DATA_URI_RE.match(data.strip())
        ext, payload = (match.group("ext"), match.group("data")) if match else ("png", data)
        ext = EXTENSION_ALIASES.get(ext.lower(), ext.lower())
        if ext not in IMAGE_EXTENSIONS:
            raise ValidationFailed(f"Unsupported image type: {ext}")
        try:
            return ext, base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            raise ValidationFailed("Image must be base64 encoded")

    def upload(self, data):
        """Store an image and return its public URL."""
        if not data:
            return ""
        ext, raw = self._decode(data)
        name = f"{self.upload_dir}/{uuid.uuid4().hex}.{ext}"
        saved = self.storage.save(name, ContentFile(raw))
        logger.debug("Uploaded image %s (%d bytes)", saved, len(raw))
        return self.storage.url(saved)

    def destroy(self, public_id):
        """Delete the stored file named public_id. Returns the count removed."""
        if not public_id:
            return 0
        removed = 0
        for ext in IMAGE_EXTENSIONS:
            name = f"{self.upload_dir}/{public_id}.{ext}"
            if self.storage.exists(name):
                self.storage.delete(name)
                removed += 1
        return removed

    def replace(self, current_url, data):
        """Destroy the image at current_url (if any) and upload data in its place."""
        if not data:
            return ""
        if current_url:
            self.destroy(public_id_from_url(current_url))
        return self.upload(data)
