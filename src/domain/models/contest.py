"""Contest domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Platform(str, Enum):
    """Contest platforms with a solution playlist."""

    CODEFORCES = "codeforces"
    CODECHEF = "codechef"
    LEETCODE = "leetcode"


class ContestStatus(str, Enum):
    """Lifecycle state of a contest."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"


@dataclass
class Contest:
    """A contest as listed by one of the platforms."""

    id: str
    name: str
    platform: Platform
    start_time: datetime
    end_time: datetime
    status: ContestStatus
    url: str | None = None
    duration: int | None = None
    solution_link: str | None = None
    additional_info: dict[str, Any] = field(default_factory=dict)

    @property
    def is_past(self) -> bool:
        return self.status == ContestStatus.PAST

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "platform": self.platform.value,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "status": self.status.value,
            "url": self.url,
            "duration": self.duration,
            "solution_link": self.solution_link,
        }
