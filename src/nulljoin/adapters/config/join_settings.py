"""Join settings model and loader.

Provides the JoinSettings Pydantic model for the ``[join]`` configuration
section and the loader that builds it from a configuration dictionary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from nulljoin.domain.enums import NullPolicy
from nulljoin.domain.errors import ConfigurationError
from nulljoin.domain.joiner import Joiner


class JoinSettings(BaseModel):
    """Validated, immutable settings for the ``join`` command.

    Example:
        >>> settings = JoinSettings(separator=" | ", null_policy="substitute", null_text="-")
        >>> settings.build_joiner().join(["a", None, "b"])
        'a | - | b'
    """

    model_config = ConfigDict(frozen=True)

    separator: str = ", "
    null_marker: str = "null"
    null_policy: NullPolicy = NullPolicy.SKIP
    null_text: str = "null"

    @field_validator("separator", "null_marker", "null_text", mode="before")
    @classmethod
    def _scalar_as_text(cls, v: Any) -> Any:
        """Give back the text of a scalar that ``--set`` decoded as JSON.

        ``--set join.separator=0`` arrives as ``0`` and
        ``--set join.null_marker=null`` as ``None``; both mean the typed text.

        Examples:
            >>> JoinSettings._scalar_as_text(None)
            'null'
            >>> JoinSettings._scalar_as_text(False)
            'false'
            >>> JoinSettings._scalar_as_text(0)
            '0'
            >>> JoinSettings._scalar_as_text([1])
            [1]
        """
        if v is None:
            return "null"
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("null_policy", mode="before")
    @classmethod
    def _normalise_policy(cls, v: Any) -> Any:
        """Accept policy names in any letter case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def build_joiner(self) -> Joiner:
        """Return a :class:`Joiner` configured from these settings."""
        joiner = Joiner.on(self.separator)
        if self.null_policy is NullPolicy.SKIP:
            return joiner.skip_nulls()
        if self.null_policy is NullPolicy.SUBSTITUTE:
            return joiner.use_for_null(self.null_text)
        return joiner


def load_join_settings_from_dict(config_dict: Mapping[str, Any]) -> JoinSettings:
    """Load JoinSettings from the ``[join]`` section of a configuration dictionary.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.

    Returns:
        Validated settings; missing keys take their defaults.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_join_settings_from_dict({"join": {"separator": "/"}}).separator
        '/'
        >>> load_join_settings_from_dict({}).null_policy
        <NullPolicy.SKIP: 'skip'>
    """
    join_section: Any = config_dict.get("join", {})
    if not isinstance(join_section, Mapping):
        raise ConfigurationError(f"[join] must be a table, got {type(join_section).__name__}")

    try:
        return JoinSettings.model_validate(dict(cast(Mapping[str, Any], join_section)))
    except ValidationError as exc:
        details = "; ".join(f"join.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [join] configuration: {details}") from exc


__all__ = [
    "JoinSettings",
    "load_join_settings_from_dict",
]
