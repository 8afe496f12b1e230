#!/usr/bin/env python3

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import jsonschema
import yaml

from retag.utils import logger
from retag.utils.exceptions import ConfigValidationError

log = logger.setup(name="config")

CONFIG_ENV_VAR = "RETAG_CONFIG"
CONFIG_FILENAME = "config.json"
DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schema" / "config.schema.json"


@dataclass(frozen=True, slots=True)
class Repository:
    """A registry location images can be pulled from or pushed to.

    Attributes:
        name (str): the name used to select this repository as a destination.
        registry (str): the registry host, optionally with a port.
        additional_names (list[str]): aliases that also select this repository.
        suffix (str): a path inside the registry that prefixes every image.
        destination_mappings (dict[str, str]): literal substring replacements
            applied to paths pushed to this repository.
    """

    name: str
    registry: str
    additional_names: list[str] = field(default_factory=list)
    suffix: str = ""
    destination_mappings: dict[str, str] = field(default_factory=dict)

    @property
    def registry_path(self) -> str:
        if not self.suffix:
            return self.registry
        return f"{self.registry}/{self.suffix}"

    def matches(self, selector: str) -> bool:
        return selector == self.name or selector in self.additional_names

    @classmethod
    def from_dict(cls, content: dict) -> "Repository":
        return cls(
            name=content["name"],
            registry=content["registry"],
            additional_names=list(content.get("additionalNames", [])),
            suffix=content.get("suffix", ""),
            destination_mappings=dict(content.get("destinationMappings", {})),
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Known repositories, in file order, and the substitutions applied to
    every generated destination."""

    repositories: list[Repository] = field(default_factory=list)
    destination_mappings: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, content: dict) -> "Config":
        return cls(
            repositories=[
                Repository.from_dict(repo) for repo in content["repositories"]
            ],
            destination_mappings=dict(content.get("destinationMappings", {})),
        )


# Not using dataclass because post_init is required for file load and parameter initialization
class ConfigFile:
    def __init__(
        self,
        config_path: Path | str,
        schema_path: Path | str = DEFAULT_SCHEMA_PATH,
        validate: bool = True,
    ):
        self.config_path: Path = Path(config_path)
        self.schema_path: Path = Path(schema_path)
        self.content: dict = self._load()
        if validate:
            self.validate_schema()

    def _load(self) -> dict:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found for path: {self.config_path}")
        log.debug("Loading config from %s", self.config_path)
        with self.config_path.open("r", encoding="utf-8") as f:
            try:
                # JSON is a subset of YAML but json gives clearer errors for .json files
                if self.config_path.suffix in (".yaml", ".yml"):
                    return yaml.safe_load(f)
                return json.load(f)
            except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as ex:
                raise ConfigValidationError(
                    f"Could not parse {self.config_path}: {ex}"
                ) from None

    def validate_schema(self) -> None:
        log.debug("Validating config against %s", self.schema_path)
        with self.schema_path.open("r", encoding="utf-8") as f:
            schema_content = json.load(f)
        try:
            jsonschema.Draft201909Validator(schema_content).validate(self.content)
        except jsonschema.ValidationError as ex:
            location = "/".join(str(p) for p in ex.absolute_path) or "<root>"
            raise ConfigValidationError(
                f"Invalid config {self.config_path} at {location}: {ex.message}"
            ) from None

    def to_config(self) -> Config:
        return Config.from_dict(self.content)

    def __repr__(self) -> str:
        return f"ConfigFile(config_path={self.config_path})"


def config_path_candidates(explicit: Optional[str] = None) -> list[Path]:
    """Return the places a config file is looked for, most specific first."""
    if explicit:
        return [Path(explicit)]
    candidates = []
    if os.environ.get(CONFIG_ENV_VAR):
        candidates.append(Path(os.environ[CONFIG_ENV_VAR]))
    candidates.append(Path.cwd() / CONFIG_FILENAME)
    # the config historically shipped next to the executable
    candidates.append(Path(sys.argv[0]).resolve().parent / CONFIG_FILENAME)
    return candidates


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    candidates = config_path_candidates(explicit)
    for candidate in candidates:
        if candidate.exists():
            return candidate
    # report the first location looked at when none exist
    return candidates[0]


def load_config(explicit: Optional[str] = None) -> Config:
    config_path = resolve_config_path(explicit)
    log.debug("Using config %s", config_path)
    return ConfigFile(config_path).to_config()
