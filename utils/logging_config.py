"""Logging configuration for the command line tools.

Library modules only create module loggers; handlers are installed here.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: int = logging.INFO,
) -> None:
    """Configure root logging.

    Args:
        log_dir: Optional directory for a ``vector_transforms.log`` file
        log_level: Logging level (default: INFO)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / "vector_transforms.log"))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


__all__ = ["setup_logging"]
