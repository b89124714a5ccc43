from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from pathlib import Path

from .config import Config
from .delegate import followup_cmds, launch, missing_scripts
from .errors import (
    InvalidBaseImageNamespace,
    InvalidBaseImageTag,
    InvalidVersion,
    MissingBaseImage,
    MissingVersion,
)
from .location import category_name, resolve_path
from .templates import persist, render
from .types import BaseImage, Semver

__version__ = "0.0.1a0.dev0"

logger = getLogger(__name__)


def validate(
    version: str | None,
    base_image: str | None,
    *,
    config: Config,
) -> tuple[Semver, BaseImage]:
    if not version:
        raise MissingVersion()
    try:
        semver = Semver.parse(version)
    except ValueError as error:
        raise InvalidVersion(version) from error

    if not base_image:
        raise MissingBaseImage()
    if not base_image.startswith(config.base_image_prefix):
        raise InvalidBaseImageNamespace(base_image, config.base_image_prefix)

    image = BaseImage.parse(base_image)
    # the tag becomes part of the output folder name
    if "/" in image.tag or "\\" in image.tag:
        raise InvalidBaseImageTag(base_image, config.base_image_prefix)

    return semver, image


def generate(
    version: str | None,
    base_image: str | None,
    *,
    config: Config | None = None,
    exists: Callable[[Path], bool] = Path.exists,
) -> Path:
    """Create ``<root>/<category>`` with a Dockerfile, README and build script.

    Nothing touches the filesystem until both arguments are validated.
    Once the files are saved the follow-up scripts are launched and left
    running; the returned path is the generated folder.
    """
    if config is None:
        config = Config()

    semver, image = validate(version, base_image, config=config)

    output = resolve_path(semver, image, root=config.root, exists=exists)
    category = category_name(output)

    persist(output, render(category, semver, image, image_name=config.image_name))

    logger.info(
        "\nPlease add the newly generated folder %s to Git."
        " Build the Docker container locally to make sure it is correct",
        output,
    )

    missing_scripts(config.scripts)
    # the follow-ups are never joined, so their Popen handles are dropped
    launch(
        followup_cmds(
            scripts=config.scripts,
            label=config.category_label,
            category=category,
            base_image=image,
        )
    )

    return output
