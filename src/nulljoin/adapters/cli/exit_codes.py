"""Process exit statuses of the ``nulljoin`` command."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit statuses, following errno and sysexits.h numbering.

    The signal members document what a shell sees after an interrupt;
    ``lib_cli_exit_tools`` produces those values itself.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    #: EINVAL: a rejected option or a strict join that met an absent item.
    INVALID_ARGUMENT = 22
    #: EX_CONFIG: the ``[join]`` table failed validation.
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
