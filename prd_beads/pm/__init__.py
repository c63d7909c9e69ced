"""
PRD -> beads conversion.

Loads user stories from prd.json, turns each into a beads issue,
and writes the JSONL file consumed by `bd import`.
"""

from prd_beads.pm.models import BeadsIssue, UserStory
from prd_beads.pm.prd import load_prd
from prd_beads.pm.issues import (
    compose_description,
    convert_stories,
    map_priority,
    story_to_issue,
    utc_timestamp,
)
from prd_beads.pm.jsonl import SerializationError, to_jsonl, write_jsonl

__all__ = [
    "BeadsIssue",
    "UserStory",
    "load_prd",
    "compose_description",
    "convert_stories",
    "map_priority",
    "story_to_issue",
    "utc_timestamp",
    "SerializationError",
    "to_jsonl",
    "write_jsonl",
]
