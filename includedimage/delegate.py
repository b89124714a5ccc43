from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from logging import getLogger
from pathlib import Path
from subprocess import Popen

from .types import BaseImage
from .util import spawn

logger = getLogger(__name__)


class FollowUp(Enum):
    config = "generate_config.py"
    readme = "generate_included_readme.py"
    commit = "generate_commit.py"


def followup_cmd(
    followup: FollowUp,
    *,
    scripts: Path,
    label: str,
    category: str,
    base_image: BaseImage,
) -> tuple[str, ...]:
    args: tuple[str, ...] = (label, category)
    if followup is FollowUp.commit:
        args = (*args, f"{base_image!s}")
    return (sys.executable, f"{scripts / followup.value}", *args)


def followup_cmds(
    *,
    scripts: Path,
    label: str,
    category: str,
    base_image: BaseImage,
) -> list[tuple[str, ...]]:
    return [
        followup_cmd(
            followup,
            scripts=scripts,
            label=label,
            category=category,
            base_image=base_image,
        )
        for followup in FollowUp
    ]


def launch(cmds: Iterable[Sequence[str]]) -> list[Popen[bytes]]:
    """Start every command in order and return without waiting.

    The children are never joined: their output, exit status and any
    failure are not observed here.
    """
    processes = []
    for cmd in cmds:
        logger.debug("launching %s", " ".join(cmd))
        processes.append(spawn(cmd))
    return processes


def missing_scripts(scripts: Path) -> list[Path]:
    missing = [
        scripts / followup.value
        for followup in FollowUp
        if not (scripts / followup.value).is_file()
    ]
    for path in missing:
        logger.warning("follow-up script %s not found", path)
    return missing
