import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from .config import PathURL

logger = logging.getLogger(__name__)

_PAIRS = TypeAdapter(list[PathURL])


class _PlainScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps untagged scalars as their source text."""

# no implicit int/float/bool/date/null resolution: `url: 2024-01-01` stays a str
_PlainScalarLoader.yaml_implicit_resolvers = {}


class RedirectConfigError(ValueError):
    """Raised when a redirect table cannot be decoded."""


def _validate(raw, source: str) -> list[PathURL]:
    if raw is None:
        return []
    try:
        return _PAIRS.validate_python(raw)
    except ValidationError as exc:
        raise RedirectConfigError(f"invalid {source} redirect list: {exc}") from exc


def parse_yaml(data: bytes | str) -> list[PathURL]:
    """
    Decode a YAML list of path/url pairs.

    Expected format:

        - path: /some-path
          url: https://www.some-url.com/demo

    Unquoted scalars are read as plain strings, so dates, numbers and
    yes/no values are kept as written. A missing key reads as "".
    An empty document decodes to an empty list.
    """
    try:
        raw = yaml.load(data, Loader=_PlainScalarLoader)
    except yaml.YAMLError as exc:
        raise RedirectConfigError(f"malformed YAML: {exc}") from exc
    return _validate(raw, "YAML")


def parse_json(data: bytes | str) -> list[PathURL]:
    """Decode a JSON array of {"path": ..., "url": ...} objects."""
    if not data.strip():
        return []
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RedirectConfigError(f"malformed JSON: {exc}") from exc
    return _validate(raw, "JSON")


def build_map(pairs: Iterable[PathURL]) -> dict[str, str]:
    # later entries overwrite earlier ones for the same path
    return {pair.path: pair.url for pair in pairs}


def load_file(path: str | Path) -> list[PathURL]:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise RedirectConfigError(f"cannot read redirect file {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        pairs = parse_json(data)
    else:
        pairs = parse_yaml(data)

    logger.info("Loaded %d redirects from %s", len(pairs), path)
    return pairs
