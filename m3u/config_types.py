"""Typed configuration dataclasses for m3u-stream-reader.

Provides strongly-typed configuration objects on top of the dict returned
by :func:`m3u.config.load_config`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class ReaderConfig:
    """How playlist files are opened and decoded."""
    encoding: str = "utf-8"
    errors: str = "strict"  # any codec error handler: strict, replace, ignore...

    def __post_init__(self):
        # Numeric codec names (e.g. 1252) arrive coerced to int from the environment
        self.encoding = str(self.encoding)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class OutputConfig:
    """CLI output settings."""
    format: str = "text"  # "text" or "json"
    lenient: bool = False  # keep untagged entries of extended playlists

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "WARNING"
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the config format."""
        return {
            "log_level": self.log_level,
            "reader": self.reader.to_dict(),
            "output": self.output.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "WARNING"),
            reader=ReaderConfig(**data.get("reader", {})),
            output=OutputConfig(**data.get("output", {})),
        )


__all__ = ["AppConfig", "ReaderConfig", "OutputConfig"]
