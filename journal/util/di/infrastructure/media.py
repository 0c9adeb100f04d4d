"""Media host infrastructure providers."""

from dishka import Scope, provide

from journal.adapter.cloudinary.client import RealCloudinaryUploader
from journal.config import CloudinarySettings
from journal.domain.service import MediaUploader
from journal.util.di.base import ProviderBase


class MediaProvider(ProviderBase):
    """Media component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider backed by Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_uploader(self, settings: CloudinarySettings) -> MediaUploader:
        """Provide Cloudinary uploader."""
        return RealCloudinaryUploader(
            cloud_name=settings.cloud_name,
            api_key=settings.api_key,
            api_secret=settings.api_secret,
            folder=settings.folder,
            api_base_url=settings.api_base_url,
            timeout=settings.timeout,
        )
