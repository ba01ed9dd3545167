"""Layered configuration loading for nulljoin.

Sources, lowest precedence first: the bundled ``defaultconfig.toml``, then
app, host and user files, ``.env`` and environment
variables, all resolved by lib_layered_config. A profile inserts
``profile/<name>/`` into every file-based layer.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from nulljoin import __init__conf__

_DEFAULT_CONFIG = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to use as directory names.

    Raises:
        ValueError: For empty, overlong, reserved or path-like names.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Location of the packaged defaults.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def _read(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG,
        start_dir=start_dir,
    )


class _ConfigLoader:
    """Callable loader, cached per ``(profile, start_dir)`` for the process."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration.

        Args:
            profile: Optional profile name; validated before any file access.
            start_dir: Directory where ``.env`` discovery starts; defaults to
                the working directory.

        Raises:
            ValueError: If ``profile`` is not a valid name.

        Example:
            >>> config = get_config()
            >>> config.get("join.null_marker")
            'null'
            >>> config.get("join.missing", default="fallback")
            'fallback'
        """
        if profile is not None:
            validate_profile(profile)
        return _read(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget cached configurations; the next call reads from disk."""
        _read.cache_clear()


get_config = _ConfigLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
