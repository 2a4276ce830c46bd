#  Copyright Contributors to the Mainframe Software Hub for Linux Project.
#  SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass, fields
import yaml
from lib.errors import ConfigFileError, ConfigValidationError
from monitoring.logger import Logger

CLOUD_IMAGE_MODE = 'cloud_image'
CUSTOM_IMAGE_MODE = 'custom_image'

DEFAULT_HTTP_TIMEOUT = 60.0

# Keys the pipeline injects into every plugin configuration
RESERVED_PREFIX = 'packer_'


@dataclass(frozen=True)
class Config:
    teamcity_url: str = ''
    username: str = ''
    password: str = ''
    project_id: str = ''
    cloud_image: str = ''
    custom_image_name: str = ''
    agent_name: str = ''
    packer_build_name: str = ''
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def mode(self) -> str:
        if self.custom_image_name or self.agent_name:
            return CUSTOM_IMAGE_MODE
        return CLOUD_IMAGE_MODE

    @property
    def updates_cloud_profile(self) -> bool:
        return self.teamcity_url != ''

    def required_fields(self) -> tuple:
        if not self.updates_cloud_profile:
            return ()
        if self.mode == CUSTOM_IMAGE_MODE:
            return ('username', 'password', 'project_id', 'custom_image_name', 'agent_name')
        return ('username', 'password', 'project_id', 'cloud_image')

    def validate(self) -> list:
        """Return every rule violation as a message, empty when valid."""
        errors = []
        if self.updates_cloud_profile and self.cloud_image and self.mode == CUSTOM_IMAGE_MODE:
            errors.append("cloud_image cannot be combined with custom_image_name or agent_name")
        for name in self.required_fields():
            if getattr(self, name) == '':
                errors.append(f"{name} is required")
        return errors

    def __repr__(self) -> str:
        return (f"Config(teamcity_url={self.teamcity_url!r}, username={self.username!r}, "
                f"project_id={self.project_id!r}, mode={self.mode!r})")


def load_raw_config(config_path: str) -> dict:
    logger = Logger()
    try:
        with open(config_path, 'r') as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        logger.error(f"Config file {config_path} not found")
        raise ConfigFileError(f"Config file {config_path} not found") from e
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse config file {config_path}: {e}")
        raise ConfigFileError(f"Failed to parse config file {config_path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.error(f"Config file {config_path} does not contain a mapping")
        raise ConfigFileError(f"Config file {config_path} does not contain a mapping")
    return raw


def _merge(raws) -> dict:
    merged = {}
    for raw in raws:
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ConfigValidationError([f"configuration must be a mapping, got {type(raw).__name__}"])
        merged.update(raw)
    return merged


def _decode_timeout(value, errors: list) -> float:
    if value is None:
        return DEFAULT_HTTP_TIMEOUT
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        errors.append(f"'http_timeout' expected a number, got {type(value).__name__}")
        return DEFAULT_HTTP_TIMEOUT
    if value <= 0:
        errors.append("http_timeout must be greater than zero")
        return DEFAULT_HTTP_TIMEOUT
    return float(value)


def _decode_string(key, value, errors: list) -> str:
    # Scalars are weakly typed the way the pipeline decodes plugin config
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return '1' if value else '0'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    errors.append(f"'{key}' expected a string, got {type(value).__name__}")
    return ''


def decode_config(*raws) -> Config:
    """Decode one or more raw configuration mappings into a validated Config.

    Later mappings override earlier ones key by key. Decoding problems and
    rule violations are collected and raised together as a single
    ConfigValidationError.
    """
    logger = Logger()
    merged = _merge(raws)
    known = {f.name for f in fields(Config)}
    errors = []
    values = {}

    for key in sorted(merged, key=str):
        value = merged[key]
        if key not in known:
            if isinstance(key, str) and key.startswith(RESERVED_PREFIX):
                continue
            errors.append(f"'{key}' is an unknown configuration key")
            continue
        if key == 'http_timeout':
            values[key] = _decode_timeout(value, errors)
        else:
            values[key] = _decode_string(key, value, errors)

    config = Config(**values)
    errors.extend(config.validate())
    if errors:
        for e in errors:
            logger.error(f"Invalid configuration: {e}")
        raise ConfigValidationError(errors)

    if config.updates_cloud_profile:
        logger.info(f"Configured cloud profile updates on {config.teamcity_url} in {config.mode} mode")
    else:
        logger.info("No teamcity_url configured, cloud profile updates are disabled")
    return config
