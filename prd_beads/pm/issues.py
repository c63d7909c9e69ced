"""
Story -> beads issue conversion.

Maps each PRD user story onto the flat issue record that `bd import`
understands: priority is remapped from the PRD's 1-3 scale onto beads'
0-4 scale, acceptance criteria and dependencies are folded into the
description, and completed stories are imported as closed.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from prd_beads.lib.config import ConverterConfig
from prd_beads.pm.models import BeadsIssue, UserStory

logger = logging.getLogger(__name__)

# PRD priority (1 = highest) -> beads priority (0 = highest)
PRIORITY_MAP = {
    1: 0,
    2: 2,
    3: 3,
}
DEFAULT_PRIORITY = 2

STATUS_OPEN = "open"
STATUS_CLOSED = "closed"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds, e.g. 2026-01-02T03:04:05.678Z"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def map_priority(prd_priority: Any) -> int:
    """Map a PRD priority onto the beads scale.

    JSON numbers carry no int/float distinction, so 1.0 is priority 1.
    Never fails: missing or unrecognized values resolve to medium (2).
    """
    level = prd_priority
    if isinstance(level, float) and level.is_integer():
        level = int(level)

    # bool is an int subclass; True must not pass for priority 1
    if isinstance(level, int) and not isinstance(level, bool):
        mapped = PRIORITY_MAP.get(level)
        if mapped is not None:
            return mapped

    if prd_priority is not None:
        logger.info(f"Unrecognized priority {prd_priority!r}, using {DEFAULT_PRIORITY}")
    return DEFAULT_PRIORITY


def compose_description(
    description: str,
    acceptance_criteria: Optional[list] = None,
    depends_on: Optional[list] = None,
) -> str:
    """Build the issue description.

    Acceptance criteria become unchecked checklist items and dependencies
    a trailing "**Dependencies:**" line, set off from the checklist by two
    blank lines. Item text is inserted verbatim.
    """
    text = description

    if acceptance_criteria:
        text += "\n\n**Acceptance Criteria:**\n"
        for criterion in acceptance_criteria:
            text += f"- [ ] {criterion}\n"

    if depends_on:
        separator = "\n\n" if acceptance_criteria else "\n"
        text += separator + "**Dependencies:** " + ", ".join(str(dep) for dep in depends_on)

    return text.strip()


def story_to_issue(
    story: UserStory,
    timestamp: str,
    config: Optional[ConverterConfig] = None,
) -> BeadsIssue:
    """Convert one story into one beads issue.

    Args:
        story: Parsed user story
        timestamp: Value for both created_at and updated_at
        config: Constant issue fields (labels, issue type, author)

    Returns:
        BeadsIssue with every field populated
    """
    if config is None:
        config = ConverterConfig()

    return BeadsIssue(
        id=story.id,
        title=story.title,
        description=compose_description(
            story.description,
            story.acceptance_criteria,
            story.depends_on,
        ),
        status=STATUS_CLOSED if story.passes else STATUS_OPEN,
        priority=map_priority(story.priority),
        issue_type=config.issue_type,
        labels=list(config.labels),
        created_at=timestamp,
        created_by=config.created_by,
        updated_at=timestamp,
        blocks=list(story.depends_on),
    )


def convert_stories(
    stories: list[UserStory],
    config: Optional[ConverterConfig] = None,
    now: Optional[datetime] = None,
) -> list[BeadsIssue]:
    """Convert stories in order, stamping all issues with the same time."""
    timestamp = utc_timestamp(now)

    issues = []
    for story in stories:
        issue = story_to_issue(story, timestamp, config)
        logger.debug(f"{issue.id}: status={issue.status} priority={issue.priority}")
        issues.append(issue)

    return issues
