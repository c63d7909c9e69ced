"""
prd-beads convert - Convert prd.json into a beads import file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from prd_beads.lib.config import ConverterConfig
from prd_beads.lib.validate import ValidationError
from prd_beads.pm.issues import convert_stories
from prd_beads.pm.jsonl import SerializationError, write_jsonl
from prd_beads.pm.prd import load_prd

logger = logging.getLogger(__name__)


def cmd_convert(args, tasks_dir: Path, config: ConverterConfig, now: Optional[datetime] = None) -> int:
    """Convert user stories to beads issues and print import instructions.

    Nothing is written unless every story converts.
    """
    input_path = config.input_path(tasks_dir)
    output_path = config.output_path(tasks_dir)

    try:
        stories = load_prd(input_path)
        issues = convert_stories(stories, config, now=now)
        write_jsonl(output_path, issues)
    except (ValidationError, SerializationError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"✓ Converted {len(issues)} user stories to beads format")
    print(f"✓ Output: {output_path}")
    print()
    print("To import into beads, run:")
    print(f"  {config.format_import_command(output_path)}")

    return 0
