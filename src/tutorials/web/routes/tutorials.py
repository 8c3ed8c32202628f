"""Tutorial endpoints.

Store errors propagate to the exception handlers registered in
``tutorials.web.api``, which map them to status codes.
"""

from fastapi import APIRouter, Depends, status

from tutorials.core.models import Tutorial
from tutorials.core.tutorial_store import TutorialStore, TutorialValidationError
from tutorials.web.dependencies import get_store
from tutorials.web.schemas import (
    DeleteAllResponse,
    DeleteResponse,
    TutorialCreate,
    TutorialResponse,
    TutorialUpdate,
)

router = APIRouter(prefix="/api/tutorials", tags=["tutorials"])


def _to_response(tutorial: Tutorial) -> TutorialResponse:
    return TutorialResponse(**tutorial.to_dict())


@router.post("", response_model=TutorialResponse, status_code=status.HTTP_201_CREATED)
async def create_tutorial(
    data: TutorialCreate,
    store: TutorialStore = Depends(get_store),
) -> TutorialResponse:
    """Create a new tutorial."""
    if not data.title or not data.title.strip():
        raise TutorialValidationError("Content can not be empty!")

    tutorial = await store.create(
        title=data.title,
        description=data.description or "",
        published=data.published,
    )
    return _to_response(tutorial)


@router.get("", response_model=list[TutorialResponse])
async def list_tutorials(
    title: str | None = None,
    store: TutorialStore = Depends(get_store),
) -> list[TutorialResponse]:
    """List tutorials, filtered by title substring when ``title`` is given."""
    if title is None:
        tutorials = await store.find_all()
    else:
        tutorials = await store.find_by_title_contains(title)
    return [_to_response(t) for t in tutorials]


@router.get("/published", response_model=list[TutorialResponse])
async def list_published_tutorials(
    store: TutorialStore = Depends(get_store),
) -> list[TutorialResponse]:
    """List published tutorials."""
    return [_to_response(t) for t in await store.find_all_published()]


@router.get("/{tutorial_id}", response_model=TutorialResponse)
async def get_tutorial(
    tutorial_id: str,
    store: TutorialStore = Depends(get_store),
) -> TutorialResponse:
    """Get a specific tutorial by ID."""
    return _to_response(await store.find_by_id(tutorial_id))


@router.put("/{tutorial_id}", response_model=TutorialResponse)
async def update_tutorial(
    tutorial_id: str,
    data: TutorialUpdate,
    store: TutorialStore = Depends(get_store),
) -> TutorialResponse:
    """Apply the supplied fields to a tutorial."""
    tutorial = await store.update(tutorial_id, data.model_dump(exclude_unset=True))
    return _to_response(tutorial)


@router.delete("/{tutorial_id}", response_model=DeleteResponse)
async def delete_tutorial(
    tutorial_id: str,
    store: TutorialStore = Depends(get_store),
) -> DeleteResponse:
    """Delete a tutorial by ID."""
    tutorial = await store.delete_by_id(tutorial_id)
    return DeleteResponse(message="Tutorial was deleted successfully!", id=tutorial.id)


@router.delete("", response_model=DeleteAllResponse)
async def delete_all_tutorials(
    store: TutorialStore = Depends(get_store),
) -> DeleteAllResponse:
    """Delete every tutorial."""
    count = await store.delete_all()
    return DeleteAllResponse(
        message=f"{count} Tutorials were deleted successfully!",
        deleted_count=count,
    )
