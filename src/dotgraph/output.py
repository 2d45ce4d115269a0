import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_STEM = "out"


def write_dot(source: str, stem: str | None = None, directory: str | Path | None = None) -> Path:
    """Write DOT text unchanged to ``<directory>/<stem>.dot`` and return the path."""
    base_path = Path(directory) if directory is not None else Path(".")
    base_path.mkdir(parents=True, exist_ok=True)
    path = base_path / f"{stem or DEFAULT_STEM}.dot"
    path.write_text(source, encoding="utf-8")
    logger.info("Dot file saved to %s", path)
    return path
