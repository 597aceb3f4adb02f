"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from dirhash.errors import ConfigError

from .models import DirhashConfig

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


def _candidate_paths(cli_path: str | None) -> list[Path]:
    if cli_path:
        if not Path(cli_path).is_file():
            raise ConfigError(cli_path, "file not found")
        return [Path(cli_path)]
    return [Path("dirhash.yaml"), Path.home() / ".dirhash" / "config.yaml"]


def load_config(cli_path: str | None = None) -> DirhashConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit *cli_path* must exist. Empty files are skipped.
    """
    for path in _candidate_paths(cli_path):
        if not path.is_file():
            continue
        try:
            raw = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(str(path), f"invalid YAML: {e}") from e
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ConfigError(str(path), "top level must be a mapping")
        try:
            return DirhashConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e

    return DirhashConfig()


def _expand_env_vars(obj: object) -> object:
    """Expand ${VAR} references in string values of a nested mapping."""
    if isinstance(obj, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    return obj


# Default YAML template for `dirhash config init`
DEFAULT_CONFIG_TEMPLATE = """\
# dirhash.yaml
# Keys are only ever taken from --key/-k on the command line.

# Passphrase for an encrypted signing key (dirhash -k KEY DIRECTORY).
# --key-passphrase and DIRHASH_KEY_PASSPHRASE take precedence.
# signing:
#   passphrase: "${MY_KEY_PASSPHRASE}"

# Logging (written to stderr)
log_level: "warn"              # debug | info | warn | error
"""
