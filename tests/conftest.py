"""Test configuration and fixtures."""

import logfire

from journal.domain.model import EntryDraft

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


# A few bytes with a PNG signature, enough to stand in for a photo upload
PHOTO_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def make_draft(
    title: str = "Day 1",
    description: str = "First entry",
    photo_url: str | None = None,
) -> EntryDraft:
    """Helper function to build entry drafts for tests.

    Args:
        title: Entry title
        description: Entry description
        photo_url: Photo URL, if the entry should carry one

    Returns:
        EntryDraft with the given content
    """
    return EntryDraft(title=title, description=description, photo_url=photo_url)
