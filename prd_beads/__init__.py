"""Convert a PRD user-story file into beads JSONL."""

__version__ = "0.1.0"
