"""Config utility for persistent anigraph settings (access token, etc.).

Provides functions to read and write the stored AniList token in
~/.config/anigraph/config.toml. Uses tomli/tomli-w for TOML parsing and writing.
"""

from pathlib import Path
from typing import Optional, TypeVar, Any, cast
import os
import contextlib

import tomli
import tomli_w

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
# Path like ~/.config/anigraph or $XDG_CONFIG_HOME/anigraph
CONFIG_DIR = _xdg_config_home / "anigraph"
CONFIG_FILE = CONFIG_DIR / "config.toml"


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _write_config_file(data: dict[str, Any]) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def get_token() -> Optional[str]:
    """Read the stored AniList access token, if any."""
    return _read_config_file().get("auth", {}).get("token") or None


def set_token(token: str) -> None:
    """Store the AniList access token in config.toml.

    Args:
        token (str): The access token to persist.
    """
    data = _read_config_file()
    data.setdefault("auth", {})["token"] = token
    _write_config_file(data)


def clear_token() -> bool:
    """Remove the stored access token.

    Returns:
        bool: True if a token was removed.
    """
    data = _read_config_file()
    auth = data.get("auth", {})
    if "token" not in auth:
        return False
    del auth["token"]
    _write_config_file(data)
    return True


# ---------------------------------------------------------------------------
# Generic configuration resolution
# ---------------------------------------------------------------------------

T = TypeVar("T")


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="auth.token" will attempt ``data["auth"]["token"]``
    returning None if any level is missing.
    """

    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "ANIGRAPH_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "auth.token" -> "ANIGRAPH_AUTH_TOKEN".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(value: str, default: Any) -> Any:
    """Convert an env var string to the type of *default*."""
    if isinstance(default, bool):
        return value.lower() in {"1", "true", "yes", "on"}
    if isinstance(default, int):
        return int(value)
    if isinstance(default, float):
        return float(value)
    return value


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
    env_var: str | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"auth.token"`` or ``"timeout"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).
        env_var: Explicit environment variable name; derived from *key* when
            omitted.

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    if cli_value is not None:
        return cli_value

    name = env_var or _make_env_var_name(key)
    if name in os.environ:
        # A malformed value (e.g. ANIGRAPH_TIMEOUT=abc) falls through to the default.
        with contextlib.suppress(ValueError):
            return cast(T, _coerce(os.environ[name], default))
        return default

    value = _lookup_nested(_read_config_file(), key)
    if value is not None:
        return cast(T, value)

    return default
