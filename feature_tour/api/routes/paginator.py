"""Paginator routes: read the current snapshot and send intents.

Intents never fail. Unknown ids and moves past either end answer 200 with
``changed: false`` and the unchanged snapshot.
"""

from fastapi import APIRouter, Depends

from feature_tour.api.dependencies import get_paginator
from feature_tour.api.schemas import IntentResponse, PaginatorStateResponse
from feature_tour.core.paginator import FeaturePaginator

router = APIRouter(prefix="/paginator", tags=["paginator"])


def _intent_response(changed: bool, paginator: FeaturePaginator) -> IntentResponse:
    return IntentResponse(
        changed=changed,
        state=PaginatorStateResponse.from_state(paginator.state),
    )


@router.get("", response_model=PaginatorStateResponse)
async def get_state(
    paginator: FeaturePaginator = Depends(get_paginator),
) -> PaginatorStateResponse:
    """Get the current paginator snapshot."""
    return PaginatorStateResponse.from_state(paginator.state)


@router.post("/select/{topic_id}", response_model=IntentResponse)
async def select_topic(
    topic_id: str,
    paginator: FeaturePaginator = Depends(get_paginator),
) -> IntentResponse:
    """Jump to the topic with ``topic_id``."""
    before = paginator.state
    paginator.select_by_id(topic_id)
    return _intent_response(paginator.state is not before, paginator)


@router.post("/next", response_model=IntentResponse)
async def next_topic(paginator: FeaturePaginator = Depends(get_paginator)) -> IntentResponse:
    """Advance to the next topic."""
    return _intent_response(paginator.advance(), paginator)


@router.post("/previous", response_model=IntentResponse)
async def previous_topic(
    paginator: FeaturePaginator = Depends(get_paginator),
) -> IntentResponse:
    """Go back to the previous topic."""
    return _intent_response(paginator.retreat(), paginator)


@router.post("/reset", response_model=IntentResponse)
async def reset_paginator(
    paginator: FeaturePaginator = Depends(get_paginator),
) -> IntentResponse:
    """Return to the first topic."""
    return _intent_response(paginator.reset(), paginator)
