"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from journal.config import CloudinarySettings, JournalSettings, Settings
from journal.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_cloudinary_settings(self, settings: Settings) -> CloudinarySettings:
        """Provide Cloudinary settings."""
        return settings.cloudinary

    @provide(scope=Scope.APP)
    def provide_journal_settings(self, settings: Settings) -> JournalSettings:
        """Provide journal behaviour settings."""
        return settings.journal
