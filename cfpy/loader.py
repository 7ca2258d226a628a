"""Filesystem loader for configuration files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from cfpy.errors import ConfigIOError

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE: Final[int] = 1024 * 1024


def resolve_path(path: str | Path, base_dir: str | Path | None = None) -> Path:
    """Resolve a relative `path` against `base_dir` (default: the working directory)."""
    candidate = Path(path).expanduser()
    if candidate.is_absolute() or base_dir is None:
        return candidate
    return Path(base_dir).expanduser() / candidate


def load_file(
    path: str | Path,
    *,
    base_dir: str | Path | None = None,
    max_size: int = DEFAULT_MAX_SIZE,
) -> bytes:
    """Read a configuration file, refusing files larger than `max_size` bytes."""
    if max_size < 0:
        raise ValueError("max_size cannot be negative")

    resolved = resolve_path(path, base_dir)
    try:
        with resolved.open("rb") as handle:
            # One extra byte tells an exact-size file from an oversized one.
            data = handle.read(max_size + 1)
    except OSError as exc:
        logger.error("Failed to read %s: %s", resolved, exc)
        raise ConfigIOError(str(resolved), exc.strerror or str(exc)) from exc

    if len(data) > max_size:
        logger.error("Refusing %s: larger than %d bytes", resolved, max_size)
        raise ConfigIOError(str(resolved), f"larger than {max_size} bytes", too_large=True)

    logger.debug("Loaded %d bytes from %s", len(data), resolved)
    return data
