"""
Storage service for uploaded product images.

Files are written under MEDIA_ROOT in a dated folder structure
(products/{year}/{month}/) with a timestamped, collision-free name.
"""

import os
import uuid
from datetime import datetime

from django.conf import settings
from django.utils.text import slugify


class ProductImageStorage:
    """Service for storing product images in organized folder structure."""

    BASE_PATH = "products"

    @classmethod
    def generate_filename(cls, original_filename, extension):
        """
        Generate unique filename with timestamp.

        Args:
            original_filename: Original uploaded filename
            extension: Extension of the stored file, without the dot

        Returns:
            str: {timestamp}_{random}_{clean_name}.{extension}

        Example:
            >>> ProductImageStorage.generate_filename('Cheese Burger.png', 'webp')
            '20250130_123456_1a2b3c4d_cheese-burger.webp'
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        name, _ = os.path.splitext(os.path.basename(original_filename or ""))
        clean_name = slugify(name) or "image"
        return f"{timestamp}_{uuid.uuid4().hex[:8]}_{clean_name}.{extension}"

    @classmethod
    def get_upload_path(cls, filename):
        """
        Get organized upload path: products/{year}/{month}/filename
        """
        now = datetime.now()
        return "/".join([cls.BASE_PATH, now.strftime("%Y"), now.strftime("%m"), filename])

    @classmethod
    def save_image(cls, image_bytes, original_filename, extension):
        """
        Save image bytes to MEDIA_ROOT, creating directories as needed.

        Returns:
            str: Relative path to saved file, using forward slashes

        Raises:
            OSError: If file cannot be written
        """
        filename = cls.generate_filename(original_filename, extension)
        upload_path = cls.get_upload_path(filename)

        full_path = os.path.join(settings.MEDIA_ROOT, *upload_path.split("/"))
        os.makedirs(os.path.dirname(full_path), exist_ok=True)

        with open(full_path, "wb") as f:
            f.write(image_bytes)

        return upload_path

    @classmethod
    def get_url(cls, upload_path):
        """Public URL for a stored image."""
        return f"{settings.MEDIA_URL}{upload_path}"
