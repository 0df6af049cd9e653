"""Component health for the feature tour.

Everything the service depends on lives in process memory, so each check is
a plain synchronous read of the catalog or the paginator. The overall status
is the worst status among the components.

Example:
    report = build_report(
        [check_catalog(topics, backend="static"), check_paginator(paginator)],
        version="1.0.0",
    )
    report.to_dict()
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from feature_tour.core.paginator import FeaturePaginator
from feature_tour.core.topics import Topic


class ServiceStatus(Enum):
    """Status of a component, ordered from best to worst."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


_SEVERITY = {
    ServiceStatus.HEALTHY: 0,
    ServiceStatus.DEGRADED: 1,
    ServiceStatus.UNHEALTHY: 2,
}


@dataclass(frozen=True)
class ComponentCheck:
    """Result of checking one component."""

    name: str
    status: ServiceStatus
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HealthReport:
    """Health of every component plus the overall verdict."""

    status: ServiceStatus
    checks: tuple[ComponentCheck, ...]
    timestamp: str
    version: str | None = None

    @property
    def ready(self) -> bool:
        """A degraded service (e.g. an empty catalog) still serves requests."""
        return self.status is not ServiceStatus.UNHEALTHY

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "version": self.version,
            "checks": [
                {
                    "name": check.name,
                    "status": check.status.value,
                    "message": check.message,
                    "details": check.details,
                }
                for check in self.checks
            ],
        }


def check_catalog(topics: Sequence[Topic] | None, backend: str | None = None) -> ComponentCheck:
    """Unhealthy before loading, degraded when the catalog has no topics."""
    if topics is None:
        return ComponentCheck("catalog", ServiceStatus.UNHEALTHY, "Catalog not loaded")

    details = {"backend": backend, "total_topics": len(topics)}
    if not topics:
        return ComponentCheck("catalog", ServiceStatus.DEGRADED, "Catalog is empty", details)
    return ComponentCheck("catalog", ServiceStatus.HEALTHY, "Loaded", details)


def check_paginator(paginator: FeaturePaginator | None) -> ComponentCheck:
    """Report the paginator's position and how many observers it has."""
    if paginator is None:
        return ComponentCheck("paginator", ServiceStatus.UNHEALTHY, "Paginator not created")

    current = paginator.current_topic
    return ComponentCheck(
        "paginator",
        ServiceStatus.HEALTHY,
        details={
            "current_index": paginator.state.current_index,
            "current_topic_id": current.id if current else None,
            "subscribers": paginator.subscriber_count,
        },
    )


def build_report(checks: Iterable[ComponentCheck], version: str | None = None) -> HealthReport:
    """Aggregate component checks into a report."""
    collected = tuple(checks)
    worst = max(
        (check.status for check in collected),
        key=_SEVERITY.__getitem__,
        default=ServiceStatus.HEALTHY,
    )
    return HealthReport(
        status=worst,
        checks=collected,
        timestamp=datetime.now(UTC).isoformat(),
        version=version,
    )
