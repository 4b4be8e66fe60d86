"""
Versioned Motif token metadata.

Each version string is `<project>-<YYYYMMDD>` and names a bundled JSON Schema
under `motif_sdk/schemas/<project>/<YYYYMMDD>.json`.
"""

from __future__ import annotations

import functools
import json
from collections.abc import Mapping
from importlib import resources
from typing import Any, Final

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from . import constants as const
from .errors import MetadataSchemaError, UnsupportedVersionError

JSONLike = dict[str, Any]

# Calendar versions bundled per project namespace.
SUPPORTED_VERSIONS: Final[Mapping[str, tuple[str, ...]]] = {
    "motif": ("20210101", "20210604"),
}


def _split_version(version: str) -> tuple[str, str]:
    if not isinstance(version, str):
        raise UnsupportedVersionError(f"Version must be a string, got {type(version).__name__}")
    project, sep, calendar = version.partition(const.METADATA_VERSION_SEP)
    if not sep or not project or not calendar:
        raise UnsupportedVersionError(
            f"{version} is not a valid version, expected <project>-<YYYYMMDD>"
        )
    return project, calendar


def validate_version(version: str) -> None:
    """Raise `UnsupportedVersionError` unless a schema is bundled for `version`."""
    project, calendar = _split_version(version)
    calendars = SUPPORTED_VERSIONS.get(project)
    if calendars is None:
        raise UnsupportedVersionError(
            f"There are no versions with the {project} project name"
        )
    if calendar not in calendars:
        raise UnsupportedVersionError(
            f"There are no versions in the {project} namespace with the "
            f"{calendar} calendar version"
        )


def supported_versions() -> list[str]:
    """All bundled versions, e.g. `["motif-20210101", "motif-20210604"]`."""
    return [
        f"{project}{const.METADATA_VERSION_SEP}{calendar}"
        for project, calendars in SUPPORTED_VERSIONS.items()
        for calendar in calendars
    ]


@functools.lru_cache(maxsize=None)
def _load_validator(version: str) -> Draft7Validator:
    project, calendar = _split_version(version)
    path = resources.files(const.METADATA_SCHEMA_PACKAGE) / project / f"{calendar}.json"
    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        raise MetadataSchemaError(f"Bundled schema for {version} is invalid: {e.message}") from e
    return Draft7Validator(schema)


def load_schema(version: str) -> JSONLike:
    """Return a copy of the JSON Schema bundled for `version`."""
    validate_version(version)
    return dict(_load_validator(version).schema)


class MetadataValidator:
    def __init__(self, version: str) -> None:
        validate_version(version)
        self.version = version
        self._validator = _load_validator(version)

    def validate(self, data: Mapping[str, object]) -> bool:
        return bool(self._validator.is_valid(data))

    def errors(self, data: Mapping[str, object]) -> list[str]:
        """Human readable schema violations, ordered by location in the document."""
        found = sorted(self._validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        out = []
        for error in found:
            where = "/".join(str(p) for p in error.absolute_path)
            out.append(f"{where}: {error.message}" if where else error.message)
        return out

    def ensure_valid(self, data: Mapping[str, object]) -> None:
        problems = self.errors(data)
        if problems:
            raise MetadataSchemaError(
                f"Metadata does not match {self.version}: " + "; ".join(problems)
            )


class MetadataGenerator:
    """Produces canonical metadata JSON: keys sorted at every level, no whitespace."""

    def __init__(self, version: str) -> None:
        self._validator = MetadataValidator(version)
        self.version = version

    def generate_json(self, data: Mapping[str, object]) -> str:
        self._validator.ensure_valid(data)
        try:
            return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise MetadataSchemaError("Metadata is not JSON-serializable") from e


class MetadataParser:
    def __init__(self, version: str) -> None:
        self._validator = MetadataValidator(version)
        self.version = version

    def parse(self, text: str | bytes) -> JSONLike:
        try:
            obj: object = json.loads(text)
        except json.JSONDecodeError as e:
            raise MetadataSchemaError("Metadata is not valid JSON") from e
        if not isinstance(obj, dict):
            raise MetadataSchemaError("Metadata JSON must be an object")
        self._validator.ensure_valid(obj)
        return obj


def generate_metadata(version: str, data: Mapping[str, object]) -> str:
    return MetadataGenerator(version).generate_json(data)


def parse_metadata(version: str, text: str | bytes) -> JSONLike:
    return MetadataParser(version).parse(text)


def validate_metadata(version: str, data: Mapping[str, object]) -> bool:
    return MetadataValidator(version).validate(data)
