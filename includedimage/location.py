from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from pathlib import Path

from .types import BaseImage, Semver

logger = getLogger(__name__)


def resolve_path(
    version: Semver,
    base_image: BaseImage,
    *,
    root: Path,
    exists: Callable[[Path], bool] = Path.exists,
) -> Path:
    """Pick the output folder for ``version`` and create it.

    ``root/<version>`` is used unless it already exists, in which case
    ``root/<version>-<base image tag>`` is used instead. The fallback is
    taken at most once; an existing fallback folder is reused as is.
    """
    output = root / f"{version!s}"

    if exists(output):
        logger.info('existing folder "%s" found', output)
        output = root / f"{version!s}-{base_image.tag}"

    if output.parent != root:
        raise ValueError(f"{output} is not a folder directly under {root}")

    logger.info('creating "%s"', output)
    output.mkdir(parents=True, exist_ok=True)

    return output


def category_name(output: Path) -> str:
    return output.name
