"""
Configuration system for lintbaseline.

Supports YAML and JSON configuration files naming the baseline file and
controlling output.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

import yaml


# Default configuration file names to search for
CONFIG_FILE_NAMES = [
    ".lintbaseline.yaml",
    ".lintbaseline.yml",
    ".lintbaseline.json",
    "lintbaseline.yaml",
    "lintbaseline.yml",
    "lintbaseline.json",
]


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: str = "text"  # text, json
    verbose: bool = False
    color: bool = True


@dataclass
class BaselineConfig:
    """
    Main configuration for lintbaseline.

    Example YAML config:

    ```yaml
    baseline: config/lint-baseline.xml

    output:
      format: text
      verbose: false
      color: true
    ```
    """
    baseline: str = ""
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaselineConfig":
        """Create config from a dictionary."""
        data = dict(data)

        if "output" in data and isinstance(data["output"], dict):
            known_output = {f for f in OutputConfig.__dataclass_fields__}
            data["output"] = OutputConfig(
                **{k: v for k, v in data["output"].items() if k in known_output}
            )

        # Map some common alternative names
        if "baseline_file" in data:
            data["baseline"] = data.pop("baseline_file")
        if data.get("baseline") is None:
            data.pop("baseline", None)

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)


def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML and JSON formats.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    content = path.read_text(encoding="utf-8")

    if path.suffix in (".yaml", ".yml"):
        return yaml.safe_load(content) or {}
    elif path.suffix == ".json":
        return json.loads(content)
    else:
        # Try both
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            pass
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError:
            data = None
        if not isinstance(data, dict):
            raise ValueError(f"Unknown config file format: {path.suffix}")
        return data


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.is_file():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def load_baseline_config(path: Optional[str] = None, start_dir: str = ".") -> BaselineConfig:
    """
    Load a BaselineConfig from a file or create a default one.

    If path is None, searches for a config file starting from start_dir.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return BaselineConfig()

    return BaselineConfig.from_dict(load_config(path))


def create_default_config() -> str:
    """
    Create a default configuration file content.
    """
    config = {
        "baseline": "lint-baseline.xml",
        "output": {
            "format": "text",
            "verbose": False,
            "color": True,
        },
    }

    return yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
