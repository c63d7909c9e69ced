"""
Converter configuration.

Loads beads.yaml from the tasks directory. If no config file exists,
returns defaults matching the conventional layout:

  tasks/prd.json          -> input
  tasks/prd-beads.jsonl   -> output
  tasks/beads.yaml        -> optional overrides

Example beads.yaml:

  labels: [frontend]
  created_by: prd-import
  import_command: bd import -i {output}
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "beads.yaml"
DEFAULT_TASKS_DIR = Path("tasks")
DEFAULT_LABELS = ["pnpm-migration"]


@dataclass
class ConverterConfig:
    """Converter settings from beads.yaml."""
    input_name: str = "prd.json"
    output_name: str = "prd-beads.jsonl"
    labels: list[str] = field(default_factory=lambda: DEFAULT_LABELS.copy())
    issue_type: str = "task"
    created_by: str = "prd-import"
    import_command: str = "bd import -i {output}"

    def input_path(self, tasks_dir: Path) -> Path:
        return tasks_dir / self.input_name

    def output_path(self, tasks_dir: Path) -> Path:
        return tasks_dir / self.output_name

    def format_import_command(self, output_path: Path) -> str:
        return self.import_command.replace("{output}", str(output_path))


def load_converter_config(tasks_dir: Optional[Path]) -> ConverterConfig:
    """Load beads.yaml and return ConverterConfig.

    If tasks_dir is None or the file doesn't exist, returns defaults.
    A file that can't be parsed is logged and ignored.
    """
    if tasks_dir is None:
        return ConverterConfig()

    config_path = tasks_dir / CONFIG_FILENAME
    if not config_path.exists():
        return ConverterConfig()

    try:
        data = yaml.safe_load(config_path.read_text())
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return ConverterConfig()

    if data is None:
        return ConverterConfig()
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {config_path}: expected a mapping, got {type(data).__name__}")
        return ConverterConfig()

    known = {f.name for f in fields(ConverterConfig)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Unknown key '{key}' in {config_path}, ignoring")
            continue
        if key == "labels":
            if isinstance(value, str):
                value = [value]
            value = [str(label) for label in value or []]
        elif value is None:
            continue
        else:
            value = str(value)
        overrides[key] = value

    return ConverterConfig(**overrides)
