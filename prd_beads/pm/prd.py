"""
PRD loading.

Reads prd.json and returns its user stories in document order.
"""

import logging
from pathlib import Path

from prd_beads.lib.validate import validate_file
from prd_beads.pm.models import UserStory

logger = logging.getLogger(__name__)


def load_prd(path: Path) -> list[UserStory]:
    """Load and validate a PRD file.

    Raises:
        ValidationError: If the file is missing, unreadable, not JSON,
            or has no usable userStories list
    """
    data = validate_file(path, "prd")
    stories = [UserStory.from_dict(item) for item in data["userStories"]]
    logger.debug(f"Loaded {len(stories)} user stories from {path}")
    return stories
