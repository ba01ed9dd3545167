"""Call signatures the CLI expects from its collaborators.

Each port is a callable :class:`~typing.Protocol`; plain module-level
functions satisfy them structurally. Adapter types are imported for type
checking only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.join_settings import JoinSettings


class GetConfig(Protocol):
    """Return the merged configuration for ``profile``."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Print a configuration, or one table of it."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class LoadJoinSettings(Protocol):
    """Turn the raw configuration mapping into validated ``[join]`` settings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> JoinSettings: ...


class InitLogging(Protocol):
    """Bring up logging for the rest of the process."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["DisplayConfig", "GetConfig", "InitLogging", "LoadJoinSettings"]
