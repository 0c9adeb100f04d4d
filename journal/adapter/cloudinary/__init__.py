"""Cloudinary media adapter."""

from .client import (
    CloudinaryUploader,
    MockCloudinaryUploader,
    RealCloudinaryUploader,
)

__all__ = ["CloudinaryUploader", "RealCloudinaryUploader", "MockCloudinaryUploader"]
