"""
Image processing utilities for product images.

Uploaded images are validated (size up to 10MB, PNG/JPEG/GIF/WEBP), resized to
fit within 800x800px keeping the aspect ratio, and re-encoded as WebP.

Usage Example:
    from apps.catalog.image_utils import ImageProcessor

    is_valid, error = ImageProcessor.validate_image(uploaded_file)
    if not is_valid:
        raise ValidationError(error)

    image_bytes, image_format = ImageProcessor.optimize_image(uploaded_file)
"""

from io import BytesIO
from typing import Optional, Tuple

from django.core.files.uploadedfile import UploadedFile

from PIL import Image

# Errors Pillow raises for unreadable or malicious files
IMAGE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


class ImageProcessor:
    """
    Service for validating and optimizing product images.
    """

    MAX_SIZE = 10 * 1024 * 1024  # 10MB
    ALLOWED_FORMATS = {"PNG", "JPEG", "GIF", "WEBP"}
    MAX_WIDTH = 800
    MAX_HEIGHT = 800
    WEBP_QUALITY = 85

    @classmethod
    def validate_image(cls, image_file: UploadedFile) -> Tuple[bool, Optional[str]]:
        """
        Validate uploaded image file.

        Checks:
        - File size (must be <= 10MB)
        - File format (must be PNG, JPEG, GIF or WEBP)
        - Image can be decoded

        Args:
            image_file: Django UploadedFile object

        Returns:
            tuple: (is_valid, error_message)
                - is_valid: True if image is valid, False otherwise
                - error_message: None if valid, error description if invalid
        """
        if image_file.size > cls.MAX_SIZE:
            return False, "File size must be less than 10MB"

        try:
            image_file.seek(0)
            img = Image.open(image_file)

            if img.format not in cls.ALLOWED_FORMATS:
                return False, "Only PNG, JPEG, GIF and WEBP files are supported"

            img.verify()
        except IMAGE_ERRORS as e:
            return False, f"Invalid image file: {e}"
        finally:
            image_file.seek(0)

        return True, None

    @classmethod
    def optimize_image(cls, image_file: UploadedFile) -> Tuple[bytes, str]:
        """
        Resize the image to fit 800x800 and convert it to WebP.

        Args:
            image_file: Django UploadedFile object that passed validate_image

        Returns:
            tuple: (image_bytes, format) where format is 'webp'

        Raises:
            ValueError: If image cannot be processed
        """
        try:
            image_file.seek(0)
            img = Image.open(image_file)

            # Flatten transparency onto white, WebP output is RGB
            if img.mode in ("RGBA", "LA", "P"):
                if img.mode == "P":
                    img = img.convert("RGBA")
                background = Image.new("RGB", img.size, (255, 255, 255))
                background.paste(img, mask=img.split()[-1])
                img = background

            if img.mode != "RGB":
                img = img.convert("RGB")

            if img.width > cls.MAX_WIDTH or img.height > cls.MAX_HEIGHT:
                img.thumbnail((cls.MAX_WIDTH, cls.MAX_HEIGHT), Image.Resampling.LANCZOS)

            buffer = BytesIO()
            img.save(buffer, format="WEBP", quality=cls.WEBP_QUALITY, method=6)
            return buffer.getvalue(), "webp"

        except IMAGE_ERRORS as e:
            raise ValueError(f"Failed to optimize image: {e}") from e

    @classmethod
    def process_product_image(cls, image_file: UploadedFile) -> Tuple[bytes, str]:
        """
        Validate and optimize in one step.

        Raises:
            ValueError: If image is invalid or cannot be processed
        """
        is_valid, error = cls.validate_image(image_file)
        if not is_valid:
            raise ValueError(error)

        return cls.optimize_image(image_file)
