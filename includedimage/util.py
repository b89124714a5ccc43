from __future__ import annotations

import stat
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from subprocess import Popen
from typing import ParamSpec

from .errors import WriteFailed

P = ParamSpec("P")


def trimmed(f: Callable[P, str]) -> Callable[P, str]:
    @wraps(f)
    def wrapped(*args: P.args, **kwargs: P.kwargs) -> str:
        return f(*args, **kwargs).strip() + "\n"

    return wrapped


@contextmanager
def writing(path: Path) -> Iterator[Path]:
    try:
        yield path
    except OSError as error:
        raise WriteFailed(path) from error


def make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def spawn(cmd: Sequence[str]) -> Popen[bytes]:
    # inherits stdin so an interactive follow-up can prompt the maintainer
    return Popen(cmd)
