"""
Configuration for the sorting and shuffling algorithms.

Settings live in a frozen pydantic model and can be loaded from YAML or JSON
files. Only O(n log n) sorters are selectable here; insertion sort is reached
through an explicit ``sorter=`` or as the short-run finisher of merge and
quick sort.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt

logger = logging.getLogger(__name__)


class ArrayOpsConfig(BaseModel):
    """Tuning knobs for the sorting and shuffling algorithms."""

    model_config = ConfigDict(frozen=True)

    stable_algorithm: str = Field("merge", pattern="^merge$")
    unstable_algorithm: str = Field("quick", pattern="^(quick|heap|merge)$")
    insertion_threshold: PositiveInt = 16
    pivot_seed: int = 0
    shuffle_seed: Optional[int] = None


DEFAULT_CONFIG = ArrayOpsConfig()


def resolve_config(config: Optional[ArrayOpsConfig]) -> ArrayOpsConfig:
    return DEFAULT_CONFIG if config is None else config


def config_from_mapping(raw: Optional[Dict[str, Any]]) -> ArrayOpsConfig:
    return ArrayOpsConfig(**raw) if raw else ArrayOpsConfig()


def load_config(path: Union[str, Path]) -> ArrayOpsConfig:
    """
    Load an ``ArrayOpsConfig`` from a YAML or JSON file.

    Args:
        path: Config file (.json, .yaml or .yml); an empty file gives defaults

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: if the file holds unknown values
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        if path.suffix.lower() == ".json":
            content = fh.read()
            raw = json.loads(content) if content.strip() else {}
        else:
            raw = yaml.safe_load(fh) or {}
    config = config_from_mapping(raw)
    logger.info(f"Loaded array_ops config from {path}: {config.model_dump()}")
    return config
