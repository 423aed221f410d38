"""Configuration loading.

Pipeline settings live in a small YAML file (see configs/count.yaml) so a
count run can be reviewed and repeated without retyping options. Stop-word
lists are plain text files, one word per line.
"""

from __future__ import annotations
from typing import Any, Dict, List

import yaml

from .errors import ConfigError


def load_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def load_stopwords(path: str) -> List[str]:
    """Read a stop-word file; blank lines and `#` comments are skipped."""
    words: List[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                words.append(line)
    return words
