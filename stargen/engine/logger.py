"""Generator logging utilities with per-stage channel toggles."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from stargen.engine.settings import load_settings

# One channel per pipeline stage; chatty per-planet stages start muted.
DEFAULT_CHANNELS = {
    "stellar": True,
    "orbits": False,
    "planets": False,
    "belts": True,
    "galaxy": True,
}


@dataclass
class LoggerConfig:
    """Level and channel toggles for generator logging."""

    level: int = logging.INFO
    channels: Dict[str, bool] = field(default_factory=DEFAULT_CHANNELS.copy)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        level_name = str(data.get("logLevel", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
        channels = DEFAULT_CHANNELS.copy()
        channels.update({name: bool(flag) for name, flag in data.get("logChannels", {}).items()})
        return cls(level=level, channels=channels)

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoggerConfig":
        return cls.from_dict(load_settings(settings_path))


class ChannelLogger:
    """Wrapper that only emits records when the channel is enabled."""

    def __init__(self, name: str, logger: logging.Logger, enabled: bool) -> None:
        self._logger = logger
        self._enabled = enabled
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def debug(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.warning(msg, *args, **kwargs)


class GameLogger:
    """Registry of stage channels on top of ``logging``."""

    def __init__(self, config: LoggerConfig) -> None:
        logging.basicConfig(
            level=config.level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            stream=sys.stderr,
        )
        self._root = logging.getLogger("stargen")
        self._root.setLevel(config.level)
        self._channels: Dict[str, ChannelLogger] = {}
        for name, enabled in config.channels.items():
            self._channels[name] = ChannelLogger(name, self._root.getChild(name), enabled)

    def channel(self, name: str) -> ChannelLogger:
        if name not in self._channels:
            # Unknown channels start disabled until explicitly enabled.
            self._channels[name] = ChannelLogger(name, self._root.getChild(name), False)
        return self._channels[name]

    def set_enabled(self, name: str, enabled: bool) -> None:
        self.channel(name).enabled = enabled

    def channels(self) -> Iterable[str]:
        return self._channels.keys()


def quiet_logger() -> GameLogger:
    channels = {name: False for name in DEFAULT_CHANNELS}
    return GameLogger(LoggerConfig(level=logging.CRITICAL, channels=channels))


def init_logger(settings_path: Optional[Path] = None) -> GameLogger:
    """Initialise a logger from settings.json."""

    settings_path = settings_path or Path("settings.json")
    return GameLogger(LoggerConfig.from_settings(settings_path))


__all__ = [
    "ChannelLogger",
    "DEFAULT_CHANNELS",
    "GameLogger",
    "LoggerConfig",
    "init_logger",
    "quiet_logger",
]
