"""YAML rules loading and validation."""

import yaml
from pathlib import Path
from typing import Union
from pydantic import ValidationError
from .schema import SegmentationRules

class RulesLoadError(Exception):
    """Exception raised when rules loading or validation fails."""
    pass

def _build_rules(data, source: str) -> SegmentationRules:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RulesLoadError(f"Rules in {source} must be a YAML mapping, got {type(data).__name__}")

    try:
        rules = SegmentationRules.model_validate(data)
    except ValidationError as e:
        raise RulesLoadError(f"Rules validation failed: {e}") from e

    issues = rules.validate_rules()
    if issues:
        raise RulesLoadError(f"Rules validation issues: {'; '.join(issues)}")

    return rules

def load_rules(path: Union[str, Path]) -> SegmentationRules:
    """
    Load and validate segmentation rules from a YAML file.

    An empty file yields the default rules.

    Args:
        path: Path to YAML rules file

    Returns:
        SegmentationRules: Validated rules

    Raises:
        RulesLoadError: If file cannot be read or rules are invalid
    """
    path = Path(path)

    if not path.exists():
        raise RulesLoadError(f"Rules file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RulesLoadError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise RulesLoadError(f"Cannot read rules file {path}: {e}") from e

    return _build_rules(data, str(path))

def load_rules_from_string(yaml_content: str) -> SegmentationRules:
    """
    Load and validate segmentation rules from a YAML string.

    Args:
        yaml_content: YAML content as string

    Returns:
        SegmentationRules: Validated rules

    Raises:
        RulesLoadError: If YAML is invalid or rules validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise RulesLoadError(f"Invalid YAML content: {e}") from e

    return _build_rules(data, "string")
