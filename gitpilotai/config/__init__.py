"""Configuration and Credential Management Package"""

import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional

API_KEY_VAR = "OPENAI_API_KEY"
ENV_FILENAME = ".gitpilotai.env"

DEFAULT_MODEL = "gpt-4o"  # 128k context window
DEFAULT_MAX_TOKENS = 1000
DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"

# Valid configuration values
VALID_BRANCH_STYLES = {"model", "slug"}
TRUTHY = {"1", "true", "yes", "on"}

# Optional settings read from the environment or the dotfile: var -> field
SETTING_VARS = {
    "GITPILOTAI_MODEL": "model",
    "GITPILOTAI_MAX_TOKENS": "max_tokens",
    "GITPILOTAI_BRANCH_STYLE": "branch_style",
    "GITPILOTAI_CONFIRM": "confirm_staging",
}


class ConfigError(Exception):
    """Raised when configuration cannot be read or written."""
    pass


class MissingCredential(ConfigError):
    """Raised when no API key is available."""
    pass


@dataclass(frozen=True)
class Config:
    """Resolved settings for one run. Loaded once, then passed around."""
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    api_url: str = DEFAULT_API_URL
    branch_style: str = "model"
    confirm_staging: bool = False
    env_file: Optional[Path] = None

    @property
    def masked_key(self) -> str:
        if len(self.api_key) <= 8:
            return "*" * len(self.api_key)
        return f"{self.api_key[:3]}...{self.api_key[-4:]}"

    def validate(self) -> tuple['Config', list[str]]:
        """Return a copy with invalid values replaced by defaults, plus warnings."""
        warnings = []
        changes = {}

        if self.branch_style not in VALID_BRANCH_STYLES:
            warnings.append(f"Invalid branch style '{self.branch_style}', using 'model'")
            changes['branch_style'] = "model"

        if not isinstance(self.max_tokens, int) or self.max_tokens <= 0:
            warnings.append(f"Invalid max_tokens '{self.max_tokens}', using {DEFAULT_MAX_TOKENS}")
            changes['max_tokens'] = DEFAULT_MAX_TOKENS

        if not self.model:
            warnings.append(f"Empty model name, using '{DEFAULT_MODEL}'")
            changes['model'] = DEFAULT_MODEL

        return (replace(self, **changes) if changes else self), warnings

    @classmethod
    def from_settings(cls, api_key: str, settings: Mapping[str, str], env_file: Optional[Path] = None) -> 'Config':
        """Build a Config from raw string settings, warning on stderr about bad values."""
        values: dict = {}
        for var, name in SETTING_VARS.items():
            raw = settings.get(var)
            if raw is None or raw == "":
                continue
            if name == "max_tokens":
                try:
                    values[name] = int(raw)
                except ValueError:
                    values[name] = raw
            elif name == "confirm_staging":
                values[name] = raw.strip().lower() in TRUTHY
            else:
                values[name] = raw.strip()

        config, warnings = cls(api_key=api_key, env_file=env_file, **values).validate()
        for warning in warnings:
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def parse_env_file(text: str) -> dict[str, str]:
    """Parse KEY=VALUE lines. Blank lines and # comments are skipped."""
    values = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export '):].strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        values[key] = value
    return values


class ConfigManager:
    """Bootstraps the credential dotfile and resolves settings.

    The environment always wins over the dotfile. The dotfile is created on
    first use and its key line is rewritten to match the environment.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, home: Optional[Path] = None):
        self.environ = os.environ if environ is None else environ
        self.home = home if home is not None else Path.home()

    @property
    def env_file(self) -> Path:
        return self.home / ENV_FILENAME

    def bootstrap(self) -> tuple[dict[str, str], bool]:
        """Create or reconcile the dotfile so its key matches the environment.

        Runs on every invocation. Returns the dotfile's values (key already
        reconciled) and whether the file was just created.
        """
        env_key = self.environ.get(API_KEY_VAR, "").strip()
        path = self.env_file

        if not path.exists():
            self._write_key(path, env_key, [])
            return {API_KEY_VAR: env_key}, True

        text = self._read(path)
        file_values = parse_env_file(text)
        if env_key and file_values.get(API_KEY_VAR) != env_key:
            self._write_key(path, env_key, text.splitlines())
            file_values[API_KEY_VAR] = env_key
        return file_values, False

    def load(self) -> Config:
        file_values, created = self.bootstrap()
        path = self.env_file

        api_key = file_values.get(API_KEY_VAR, "").strip()
        if not api_key:
            if created:
                raise MissingCredential(
                    f"{API_KEY_VAR} is not set and was added to {path}. "
                    f"Please set it:\n  export {API_KEY_VAR}='your-key-here'"
                )
            raise MissingCredential(
                f"{API_KEY_VAR} is empty. Add your key to {path} or set the environment variable."
            )

        settings = {**file_values, **{k: v for k, v in self.environ.items() if k in SETTING_VARS}}
        return Config.from_settings(api_key, settings, env_file=path)

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding='utf-8')
        except OSError as e:
            raise ConfigError(f"Could not read {path}: {e}")

    def _write_key(self, path: Path, api_key: str, lines: list[str]) -> None:
        """Write the key line, keeping every other line of an existing file."""
        new_line = f"{API_KEY_VAR}={api_key}"
        out, replaced = [], False
        for line in lines:
            key = line.split('=', 1)[0].strip()
            if key.startswith('export '):
                key = key[len('export '):].strip()
            if key == API_KEY_VAR and '=' in line:
                if not replaced:
                    out.append(new_line)
                    replaced = True
                continue
            out.append(line)
        if not replaced:
            out.insert(0, new_line)

        try:
            path.write_text('\n'.join(out) + '\n', encoding='utf-8')
        except OSError as e:
            raise ConfigError(f"Could not write {path}: {e}")


def load_config(environ: Optional[Mapping[str, str]] = None, home: Optional[Path] = None) -> Config:
    return ConfigManager(environ=environ, home=home).load()


__all__ = [
    "Config",
    "ConfigManager",
    "ConfigError",
    "MissingCredential",
    "load_config",
    "parse_env_file",
    "API_KEY_VAR",
    "ENV_FILENAME",
    "DEFAULT_MODEL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_API_URL",
    "VALID_BRANCH_STYLES",
]
