"""Journal entry routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, UploadFile, status

from journal.application.usecase.entry import (
    CreateEntryRequest,
    CreateEntryUseCase,
    DeleteEntryRequest,
    DeleteEntryUseCase,
    GetEntryRequest,
    GetEntryUseCase,
    JournalEntryResponse,
    LikeEntryRequest,
    LikeEntryUseCase,
    ListEntriesUseCase,
)
from journal.config import JournalSettings
from journal.domain.error import ValidationError

router = APIRouter(
    prefix="/journalEntries", tags=["journal"], route_class=DishkaRoute
)


@router.get("", response_model=list[JournalEntryResponse])
async def list_entries(
    list_entries_use_case: FromDishka[ListEntriesUseCase],
) -> list[JournalEntryResponse]:
    """List every journal entry.

    Returns:
        All entries, oldest first
    """
    result = await list_entries_use_case.execute()
    return result.entries


@router.post(
    "", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED
)
async def create_entry(
    create_entry_use_case: FromDishka[CreateEntryUseCase],
    journal_settings: FromDishka[JournalSettings],
    title: str | None = Form(default=None, alias="Title"),
    description: str | None = Form(default=None, alias="Description"),
    photo: UploadFile | None = File(default=None, alias="Photo"),
) -> JournalEntryResponse:
    """Create a journal entry from a multipart form.

    The optional ``Photo`` file is uploaded to the media host before the
    entry is stored; its URL becomes the entry's ``Photo``.

    Args:
        create_entry_use_case: Create entry use case from DI
        journal_settings: Journal settings from DI
        title: ``Title`` form field
        description: ``Description`` form field
        photo: ``Photo`` file field (optional)

    Returns:
        Created entry

    Raises:
        ValidationError: If a required field is missing (400)
        UploadError: If the photo upload fails (500)
        StorageError: If the entry could not be stored (500)
    """
    data = None
    filename = None
    # Browsers send an empty, unnamed part when no file was picked
    if photo is not None and photo.filename:
        data = await photo.read()
        filename = photo.filename

    if data is None and journal_settings.require_photo:
        raise ValidationError("No file uploaded.")

    return await create_entry_use_case.execute(
        CreateEntryRequest(
            title=title,
            description=description,
            photo=data,
            filename=filename,
        )
    )


@router.get("/{entry_id}", response_model=JournalEntryResponse)
async def get_entry(
    entry_id: str,
    get_entry_use_case: FromDishka[GetEntryUseCase],
) -> JournalEntryResponse:
    """Get a journal entry by ID.

    Raises:
        NotFoundError: If no entry has this id (404)
    """
    return await get_entry_use_case.execute(GetEntryRequest(entry_id=entry_id))


@router.patch("/{entry_id}/like", response_model=JournalEntryResponse)
async def like_entry(
    entry_id: str,
    like_entry_use_case: FromDishka[LikeEntryUseCase],
) -> JournalEntryResponse:
    """Add one like to a journal entry.

    Args:
        entry_id: Entry UUID
        like_entry_use_case: Like entry use case from DI

    Returns:
        Updated entry

    Raises:
        NotFoundError: If no entry has this id (404)
    """
    return await like_entry_use_case.execute(LikeEntryRequest(entry_id=entry_id))


@router.delete("/{entry_id}", response_model=JournalEntryResponse)
async def delete_entry(
    entry_id: str,
    delete_entry_use_case: FromDishka[DeleteEntryUseCase],
) -> JournalEntryResponse:
    """Delete a journal entry.

    Args:
        entry_id: Entry UUID
        delete_entry_use_case: Delete entry use case from DI

    Returns:
        The deleted entry

    Raises:
        NotFoundError: If no entry has this id (404)
    """
    return await delete_entry_use_case.execute(DeleteEntryRequest(entry_id=entry_id))
