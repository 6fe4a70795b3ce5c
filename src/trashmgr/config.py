"""Trash location configuration for trashmgr."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from trashmgr.errors import ConfigError

TRASH_DIR_ENV: str = "TRASHMGR_DIR"
XDG_DATA_HOME_ENV: str = "XDG_DATA_HOME"


@dataclass(slots=True, frozen=True)
class TrashConfig:
    """
    Where the trash directory lives.

    Resolution order for from_env():
        - $TRASHMGR_DIR
        - $XDG_DATA_HOME/Trash
        - ~/.local/share/Trash
    """

    trash_dir: Path

    def __post_init__(self) -> None:
        if not isinstance(self.trash_dir, Path):
            raise TypeError("TrashConfig.trash_dir must be a Path")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> TrashConfig:
        """
        Build config from environment variables.

        Raises:
            ConfigError: if a configured directory is relative, or no home
                directory can be determined.
        """
        env = os.environ if environ is None else environ

        explicit = env.get(TRASH_DIR_ENV, "").strip()
        if explicit:
            return cls(trash_dir=_require_absolute(explicit, TRASH_DIR_ENV))

        data_home = env.get(XDG_DATA_HOME_ENV, "").strip()
        if data_home:
            return cls(trash_dir=_require_absolute(data_home, XDG_DATA_HOME_ENV) / "Trash")

        try:
            home = Path.home()
        except RuntimeError as exc:
            raise ConfigError(
                "Could not determine home directory for the default trash location",
                cause=exc,
            ) from exc
        return cls(trash_dir=home / ".local" / "share" / "Trash")


def _require_absolute(value: str, env_name: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        raise ConfigError(
            f"{env_name} must be an absolute path: {value}",
            details={"env": env_name, "value": value},
        )
    return path
