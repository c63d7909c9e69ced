"""
JSONL output for `bd import`.

One compact JSON object per line, in story order, each line ending in
a single newline. The whole file is rendered in memory and swapped into
place, so a failed run never leaves a partial file behind.
"""

import json
import logging
import os
import tempfile
from dataclasses import asdict
from pathlib import Path

from prd_beads.lib.validate import validate_before_write
from prd_beads.pm.models import BeadsIssue

logger = logging.getLogger(__name__)


class SerializationError(Exception):
    """An issue could not be encoded as JSON."""


def to_jsonl(issues: list[BeadsIssue]) -> str:
    """Render issues as JSONL text.

    An empty list renders as a single newline. Every line is checked to
    be strict JSON (no NaN/Infinity) that encodes as UTF-8.

    Raises:
        SerializationError: If any issue holds a value JSON can't represent
    """
    lines = []
    for issue in issues:
        try:
            line = json.dumps(
                asdict(issue),
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
            line.encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(f"Cannot serialize issue {issue.id}: {e}") from e
        lines.append(line)
    return "\n".join(lines) + "\n"


def write_jsonl(path: Path, issues: list[BeadsIssue]) -> None:
    """Validate issues and write them to path in a single replace.

    Raises:
        ValidationError: If an issue doesn't match the issue schema
        SerializationError: If an issue can't be encoded
    """
    data = to_jsonl(issues).encode("utf-8")
    for issue in issues:
        validate_before_write(asdict(issue), "issue", path)

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        mode="wb",
        dir=str(path.parent),
        prefix=f".{path.name}.",
        delete=False,
    )
    try:
        with tmp:
            tmp.write(data)
        os.replace(tmp.name, path)
    except Exception:
        os.unlink(tmp.name)
        raise

    logger.debug(f"Wrote {len(issues)} issues to {path}")
