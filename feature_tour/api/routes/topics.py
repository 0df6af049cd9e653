"""Topic catalog routes (list and detail views)."""

from fastapi import APIRouter, Depends, HTTPException, status

from feature_tour.api.dependencies import get_topics
from feature_tour.api.schemas import TopicListResponse, TopicResponse, TopicSummaryResponse
from feature_tour.core.logging import get_logger
from feature_tour.core.topics import Topic

logger = get_logger(__name__)

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("", response_model=TopicListResponse)
async def list_topics(topics: tuple[Topic, ...] = Depends(get_topics)) -> TopicListResponse:
    """List every topic in display order."""
    return TopicListResponse(
        topics=[
            TopicSummaryResponse(id=topic.id, title=topic.title, summary=topic.summary)
            for topic in topics
        ],
        total=len(topics),
    )


@router.get("/{topic_id}", response_model=TopicResponse)
async def get_topic(
    topic_id: str,
    topics: tuple[Topic, ...] = Depends(get_topics),
) -> TopicResponse:
    """Get a single topic.

    Raises:
        HTTPException: 404 if no topic has that id.
    """
    for topic in topics:
        if topic.id == topic_id:
            return TopicResponse.from_topic(topic)

    logger.info("topic_not_found", topic_id=topic_id)
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Topic not found: {topic_id}",
    )
