"""Pydantic schemas for API responses.

This module defines the data models used for serializing topics and
paginator snapshots over HTTP and WebSocket.
"""

from pydantic import BaseModel, ConfigDict, Field

from feature_tour.core.pagination import PaginatorState
from feature_tour.core.topics import Topic


class TopicResponse(BaseModel):
    """Schema for a single topic (detail view)."""

    id: str
    title: str
    summary: str
    highlights: list[str] = Field(default_factory=list)
    code_hint: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "state-hoisting",
                "title": "State management and state hoisting",
                "summary": "Hoist state so composables stay stateless and easy to test.",
                "highlights": ["Keep state with remember and mutableStateOf."],
                "code_hint": 'var query by rememberSaveable { mutableStateOf("") }',
            }
        }
    )

    @classmethod
    def from_topic(cls, topic: Topic) -> "TopicResponse":
        return cls.model_validate(topic.to_dict())


class TopicSummaryResponse(BaseModel):
    """Schema for a topic in the list view."""

    id: str
    title: str
    summary: str


class TopicListResponse(BaseModel):
    """Schema for the topic catalog."""

    topics: list[TopicSummaryResponse] = Field(default_factory=list)
    total: int = Field(..., ge=0)


class PaginatorStateResponse(BaseModel):
    """Schema for a paginator snapshot."""

    current_index: int = Field(..., ge=0)
    total_topics: int = Field(..., ge=0)
    current_topic: TopicResponse | None = Field(
        None, description="Null when the catalog is empty"
    )
    can_advance: bool
    can_retreat: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "current_index": 1,
                "total_topics": 5,
                "current_topic": {
                    "id": "state-hoisting",
                    "title": "State management and state hoisting",
                    "summary": "Hoist state so composables stay stateless.",
                    "highlights": [],
                    "code_hint": "",
                },
                "can_advance": True,
                "can_retreat": True,
            }
        }
    )

    @classmethod
    def from_state(cls, state: PaginatorState[Topic]) -> "PaginatorStateResponse":
        current = state.current_item
        return cls(
            current_index=state.current_index,
            total_topics=state.total_items,
            current_topic=TopicResponse.from_topic(current) if current else None,
            can_advance=state.has_next,
            can_retreat=state.has_prev,
        )


class IntentResponse(BaseModel):
    """Schema for the result of a navigation intent."""

    changed: bool = Field(..., description="False when the intent was ignored")
    state: PaginatorStateResponse
