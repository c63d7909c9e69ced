"""
Data models for PRD conversion.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class UserStory:
    """A user story as written in prd.json.

    Field names follow the Python convention; from_dict() maps the
    camelCase keys of the document.
    """
    id: str                                    # US-001
    title: str
    description: str
    acceptance_criteria: list = field(default_factory=list)
    depends_on: list = field(default_factory=list)
    priority: Optional[Any] = None             # 1 (high) .. 3 (low), anything else means medium
    passes: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "UserStory":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            acceptance_criteria=list(data.get("acceptanceCriteria") or []),
            depends_on=list(data.get("dependsOn") or []),
            priority=data.get("priority"),
            passes=bool(data.get("passes")),
        )


@dataclass
class BeadsIssue:
    """One line of a beads JSONL import file.

    Field order is the key order of the serialized record.
    """
    id: str
    title: str
    description: str
    status: str                                # open, closed
    priority: int                              # 0 (highest) .. 4 (lowest)
    issue_type: str
    labels: list[str]
    created_at: str                            # ISO timestamp, shared by the whole run
    created_by: str
    updated_at: str
    blocks: list = field(default_factory=list)
