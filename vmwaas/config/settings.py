"""
Configuration management for the VMware as a Service SDK.

Builds service settings from a credentials file and the process
environment. Keys are prefixed with the upper-cased service name, so the
default service reads VMWARE_URL, VMWARE_AUTH_TYPE, VMWARE_APIKEY, ...

Credentials files are either YAML (``.yaml``/``.yml``) or ``KEY=VALUE``
lines. YAML values support ${ENV_VAR} substitution with optional default
values: ${ENV_VAR:default}.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from vmwaas.core.url import validate_service_url
from vmwaas.exceptions import InvalidConfigurationError
from vmwaas.logging_config import get_logger
from vmwaas.sdk.authenticators import (
    Authenticator,
    BasicAuthenticator,
    BearerTokenAuthenticator,
    IamAuthenticator,
    NoAuthAuthenticator,
)

logger = get_logger(__name__)

DEFAULT_CREDENTIALS_FILE = "vmware-credentials.env"
CREDENTIALS_FILE_VARS = ("VMWARE_CREDENTIALS_FILE", "IBM_CREDENTIALS_FILE")

AUTH_TYPES = {
    "noauth": "noauth",
    "basic": "basic",
    "iam": "iam",
    "bearer": "bearer",
    "bearertoken": "bearer",
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off", ""}


def _expand_env_vars(value: Any, environ: Mapping[str, str]) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Examples:
        "${VMWARE_APIKEY}" -> value of VMWARE_APIKEY env var
        "${REGION:us-south}" -> value of REGION or "us-south" if not set
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v, environ) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item, environ) for item in value]
    else:
        return value


@dataclass
class ServiceConfig:
    """Settings for one service, after merging file and environment."""

    service_name: str
    url: Optional[str] = None
    auth_type: str = "noauth"
    username: Optional[str] = None
    password: Optional[str] = None
    apikey: Optional[str] = None
    bearer_token: Optional[str] = None
    auth_url: Optional[str] = None
    disable_ssl: bool = False
    enable_gzip: bool = False
    enable_retries: bool = False
    max_retries: int = 0
    retry_interval: float = 0.0


def get_credentials_file_path(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    """
    Locate the credentials file.

    Lookup order: ``config_path``, VMWARE_CREDENTIALS_FILE,
    IBM_CREDENTIALS_FILE, then ./vmware-credentials.env if it exists.

    Raises:
        InvalidConfigurationError: If ``config_path`` names a missing file
    """
    environ = os.environ if environ is None else environ
    if config_path is not None:
        path = Path(os.path.expanduser(config_path))
        if not path.is_file():
            raise InvalidConfigurationError(f"credentials file not found: {config_path}")
        return path

    for var in CREDENTIALS_FILE_VARS:
        value = environ.get(var)
        if value:
            path = Path(os.path.expanduser(value))
            if path.is_file():
                return path
            logger.warning(f"Credentials file named by {var} not found at {path}, ignoring")

    path = Path.cwd() / DEFAULT_CREDENTIALS_FILE
    if path.is_file():
        return path
    return None


def _read_properties(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for line_number, raw_line in enumerate(path.read_text().splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            raise InvalidConfigurationError(
                f"Malformed line {line_number} in credentials file '{path}': expected KEY=VALUE"
            )
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip()
    return values


def _read_yaml(path: Path, service_name: str, environ: Mapping[str, str]) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML credentials file '{path}': {e}", exc_info=True)
        raise InvalidConfigurationError(f"Failed to parse YAML credentials file '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"Credentials file '{path}' must contain a mapping")

    data = _expand_env_vars(data, environ)

    # A section named after the service holds unprefixed keys
    section = data.get(service_name)
    if isinstance(section, dict):
        prefix = _prefix(service_name)
        return {prefix + str(k).upper(): v for k, v in section.items()}
    return {str(k): v for k, v in data.items()}


def _prefix(service_name: str) -> str:
    return service_name.upper().replace("-", "_") + "_"


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise InvalidConfigurationError(f"{key} must be a boolean, got '{value}'")


def _parse_non_negative(key: str, value: Any, kind: type) -> Any:
    try:
        parsed = kind(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"{key} must be a number, got '{value}'") from None
    if parsed < 0:
        raise InvalidConfigurationError(f"{key} must not be negative, got {parsed}")
    return parsed


def load_config(
    service_name: str = "vmware",
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ServiceConfig:
    """
    Load service settings from the credentials file and the environment.

    The environment overrides the file. Unknown keys are ignored.

    Args:
        service_name: Service whose keys to read ("vmware" reads VMWARE_*)
        config_path: Explicit credentials file
        environ: Environment mapping; defaults to os.environ

    Returns:
        ServiceConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    environ = os.environ if environ is None else environ
    prefix = _prefix(service_name)

    merged: Dict[str, Any] = {}
    path = get_credentials_file_path(config_path, environ)
    if path is not None:
        if path.suffix.lower() in (".yaml", ".yml"):
            file_values = _read_yaml(path, service_name, environ)
        else:
            file_values = _read_properties(path)
        merged.update(file_values)
        logger.debug(f"Loaded credentials file {path}")

    merged.update({k: v for k, v in environ.items() if k.startswith(prefix)})
    values = {k[len(prefix):]: v for k, v in merged.items() if k.startswith(prefix)}

    config = _build_config(service_name, values)
    _validate_config(config)
    logger.debug(
        f"Loaded configuration for service '{service_name}'",
        auth_type=config.auth_type,
        url=config.url,
    )
    return config


def _build_config(service_name: str, values: Mapping[str, Any]) -> ServiceConfig:
    prefix = _prefix(service_name)

    def get(key: str) -> Optional[str]:
        value = values.get(key)
        if value is None or value == "":
            return None
        return str(value)

    apikey = get("APIKEY")
    raw_auth_type = get("AUTH_TYPE")
    if raw_auth_type is None:
        auth_type = "iam" if apikey else "noauth"
    else:
        auth_type = AUTH_TYPES.get(raw_auth_type.lower())
        if auth_type is None:
            raise InvalidConfigurationError(
                f"{prefix}AUTH_TYPE must be one of {sorted(set(AUTH_TYPES.values()))}, "
                f"got '{raw_auth_type}'"
            )

    url = get("URL")
    if url is not None:
        url = validate_service_url(url)

    max_retries = values.get("MAX_RETRIES")
    retry_interval = values.get("RETRY_INTERVAL")

    return ServiceConfig(
        service_name=service_name,
        url=url,
        auth_type=auth_type,
        username=get("USERNAME"),
        password=get("PASSWORD"),
        apikey=apikey,
        bearer_token=get("BEARER_TOKEN") or apikey,
        auth_url=get("AUTH_URL"),
        disable_ssl=_parse_bool(prefix + "DISABLE_SSL", values.get("DISABLE_SSL", False)),
        enable_gzip=_parse_bool(prefix + "ENABLE_GZIP", values.get("ENABLE_GZIP", False)),
        enable_retries=_parse_bool(prefix + "ENABLE_RETRIES", values.get("ENABLE_RETRIES", False)),
        max_retries=_parse_non_negative(prefix + "MAX_RETRIES", max_retries, int) if max_retries not in (None, "") else 0,
        retry_interval=(
            _parse_non_negative(prefix + "RETRY_INTERVAL", retry_interval, float)
            if retry_interval not in (None, "") else 0.0
        ),
    )


def _validate_config(config: ServiceConfig) -> None:
    """
    Check that the chosen authenticator has its credentials.

    Raises:
        InvalidConfigurationError: If a credential is missing
    """
    prefix = _prefix(config.service_name)
    if config.auth_type == "basic" and not (config.username and config.password):
        logger.error("Configuration validation failed: basic auth requires username and password")
        raise InvalidConfigurationError(f"basic auth requires {prefix}USERNAME and {prefix}PASSWORD")
    if config.auth_type == "iam" and not config.apikey:
        logger.error("Configuration validation failed: iam auth requires an API key")
        raise InvalidConfigurationError(f"iam auth requires {prefix}APIKEY")
    if config.auth_type == "bearer" and not config.bearer_token:
        logger.error("Configuration validation failed: bearer auth requires a token")
        raise InvalidConfigurationError(f"bearer auth requires {prefix}BEARER_TOKEN or {prefix}APIKEY")


def build_authenticator(config: ServiceConfig) -> Authenticator:
    """
    Instantiate the authenticator selected by ``config.auth_type``.

    Raises:
        InvalidConfigurationError: If the credentials are malformed
    """
    if config.auth_type == "basic":
        return BasicAuthenticator(config.username, config.password)
    if config.auth_type == "iam":
        return IamAuthenticator(
            config.apikey,
            url=config.auth_url,
            disable_ssl_verification=config.disable_ssl,
        )
    if config.auth_type == "bearer":
        return BearerTokenAuthenticator(config.bearer_token)
    return NoAuthAuthenticator()
