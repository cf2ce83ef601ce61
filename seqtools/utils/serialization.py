"""Serialization utilities for scoring schemes (load and save)."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from seqtools.constants import SCORING_KEYS
from seqtools.types import InvalidScoringParameter, ScoringScheme


def scoring_to_dict(scoring: ScoringScheme) -> Dict[str, Any]:
    """
    Convert the configurable part of a ScoringScheme into a plain dictionary
    suitable for YAML.
    """
    values = asdict(scoring)
    return {key: values[key] for key in SCORING_KEYS}


def scoring_from_dict(payload: Dict[str, Any]) -> ScoringScheme:
    """Build a ScoringScheme from a mapping, optionally nested under ``scoring``."""
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidScoringParameter(
            f"Scoring configuration must be a mapping, got {type(payload).__name__}"
        )

    params = payload.get("scoring", payload)
    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise InvalidScoringParameter("'scoring' section must be a mapping")

    unexpected = [key for key in params if key not in SCORING_KEYS]
    if unexpected:
        raise InvalidScoringParameter(
            f"Scoring configuration has unexpected keys: {unexpected}"
        )
    return ScoringScheme(**params)


def load_scoring(yaml_path: Union[str, Path]) -> ScoringScheme:
    """Load gap penalties from a YAML file."""
    yaml_path = Path(yaml_path)
    with yaml_path.open("r", encoding="utf-8") as handle:
        try:
            payload = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise InvalidScoringParameter(
                f"Could not parse scoring configuration {yaml_path}: {exc}"
            ) from exc
    return scoring_from_dict(payload)


def dump_scoring(scoring: ScoringScheme, yaml_path: Union[str, Path]) -> None:
    """Write the gap penalties of ``scoring`` to a YAML file."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"scoring": scoring_to_dict(scoring)}, handle, sort_keys=False)


__all__ = ["scoring_to_dict", "scoring_from_dict", "load_scoring", "dump_scoring"]
