"""lib_log_rich runtime configured from the ``[lib_log_rich]`` table.

Every entry point calls :func:`init_logging`; the runtime is set up once per
process and later calls are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from nulljoin import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` table.

    Only ``service`` and ``environment`` are declared; any other key is kept
    and passed to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(service="nulljoin", console_level="WARNING").model_dump(exclude_none=True)
        {'service': 'nulljoin', 'environment': 'prod', 'console_level': 'WARNING'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section = config.get("lib_log_rich", default={})
    table: Mapping[str, Any] = section if isinstance(section, Mapping) else {}
    settings = LoggingConfigModel.model_validate(dict(table))
    passthrough = settings.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich and route standard :mod:`logging` records into it.

    ``LOG_*`` variables from a ``.env`` file are honoured.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
