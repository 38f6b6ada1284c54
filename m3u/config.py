from __future__ import annotations
import os
import json
import logging
from typing import Any, Dict
from pathlib import Path
import codecs
import copy

logger = logging.getLogger(__name__)

ENV_PREFIX = "M3U__"

OUTPUT_FORMATS = ("text", "json")

_DEFAULTS: Dict[str, Any] = {
    "log_level": "WARNING",
    "reader": {
        "encoding": "utf-8",
        "errors": "strict",
    },
    "output": {
        "format": "text",
        "lenient": False,
    },
}


def validate_config(cfg: Dict[str, Any]) -> None:
    """Check values that would otherwise fail late, while reading a playlist.

    Raises:
        ValueError: If the output format or the text encoding is unknown.
    """
    fmt = cfg.get('output', {}).get('format', 'text')
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{fmt}'. "
            f"Please set {ENV_PREFIX}OUTPUT__FORMAT to one of: {', '.join(OUTPUT_FORMATS)}"
        )
    encoding = cfg.get('reader', {}).get('encoding', 'utf-8')
    try:
        codecs.lookup(str(encoding))
    except LookupError:
        raise ValueError(
            f"Unknown encoding '{encoding}'. Please set {ENV_PREFIX}READER__ENCODING to a valid codec name"
        )


def deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dict b into a (shallow copies) returning new dict.
    Nested dicts are merged recursively; other values override.
    """
    result = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)  # type: ignore[arg-type]
        else:
            result[k] = v
    return result


def _load_dotenv(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, val = line.split('=', 1)
        key = key.strip()
        val = _strip_inline_comment(val.strip())
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ('"', "'"):
            val = val[1:-1]
        if key:
            values[key] = val
    return values


def _strip_inline_comment(val: str) -> str:
    """Cut a trailing ``# comment`` unless the ``#`` is inside quotes."""
    quote = None
    for i, ch in enumerate(val):
        if ch in ('"', "'"):
            if quote is None:
                quote = ch
            elif quote == ch:
                quote = None
        elif ch == '#' and quote is None:
            return val[:i].rstrip()
    return val


def load_config(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env loading is skipped
    unless M3U_ENABLE_DOTENV=1 is set to allow deterministic defaults.

    Args:
        overrides: Dict of values to deep-merge last (CLI flags, tests).

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).

    Raises:
        ValueError: If the merged configuration is invalid.
    """
    dotenv_values: Dict[str, str] = {}
    if os.environ.get('M3U_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
        dotenv_values = _load_dotenv(Path('.env'))
    # Deep copy defaults to avoid cross-call mutation of nested dicts
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    # Real environment wins over .env
    combined = {**{k: v for k, v in dotenv_values.items() if k.startswith(ENV_PREFIX)},
                **{k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}}
    for raw_key, value in combined.items():
        path_parts = raw_key[len(ENV_PREFIX):].split("__")
        cursor: Dict[str, Any] = cfg
        for part in path_parts[:-1]:
            cursor = cursor.setdefault(part.lower(), {})  # type: ignore[assignment]
        cursor[path_parts[-1].lower()] = coerce_scalar(value)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    validate_config(cfg)
    _configure_logging(str(cfg.get('log_level', 'WARNING')))
    logger.debug(f"Loaded configuration: {cfg}")
    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None):
    """Load configuration as typed AppConfig object.

    Args:
        overrides: Dictionary of override values

    Returns:
        AppConfig: Typed configuration object with .to_dict() for dict conversion
    """
    from .config_types import AppConfig
    return AppConfig.from_dict(load_config(overrides))


def _configure_logging(level_str: str) -> None:
    """Configure Python logging based on configured level."""
    level = logging.getLevelName(level_str.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(message)s',
        force=True  # Reconfigure even if already configured
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
    # JSON object or array
    if (txt.startswith('[') and txt.endswith(']')) or (txt.startswith('{') and txt.endswith('}')):
        try:
            return json.loads(txt)
        except ValueError:
            pass  # fall through to scalar heuristics
    lower = txt.lower()
    if lower in {"true", "yes", "on"}:
        return True
    if lower in {"false", "no", "off"}:
        return False
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt


__all__ = ["load_config", "deep_merge", "load_typed_config", "validate_config", "coerce_scalar"]
