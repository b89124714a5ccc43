import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from includedimage.delegate import (
    FollowUp,
    followup_cmd,
    followup_cmds,
    launch,
    missing_scripts,
)
from includedimage.types import BaseImage

BASE_IMAGE = BaseImage.parse("cypress/browsers:node12.6.0-chrome77")


def test_followup_cmd() -> None:
    cmd = followup_cmd(
        FollowUp.config,
        scripts=Path("scripts"),
        label="included",
        category="3.8.3",
        base_image=BASE_IMAGE,
    )

    assert cmd == (
        sys.executable,
        f"{Path('scripts') / 'generate_config.py'}",
        "included",
        "3.8.3",
    )


def test_followup_cmds() -> None:
    cmds = followup_cmds(
        scripts=Path("scripts"),
        label="included",
        category="3.8.3-node12.6.0-chrome77",
        base_image=BASE_IMAGE,
    )

    assert [Path(cmd[1]).name for cmd in cmds] == [
        "generate_config.py",
        "generate_included_readme.py",
        "generate_commit.py",
    ]
    assert [cmd[2:] for cmd in cmds] == [
        ("included", "3.8.3-node12.6.0-chrome77"),
        ("included", "3.8.3-node12.6.0-chrome77"),
        (
            "included",
            "3.8.3-node12.6.0-chrome77",
            "cypress/browsers:node12.6.0-chrome77",
        ),
    ]


def test_launch(spawned: list[tuple[str, ...]]) -> None:
    processes = launch([("a", "1"), ("b", "2"), ("c", "3")])

    assert spawned == [("a", "1"), ("b", "2"), ("c", "3")]
    assert [process.args for process in processes] == spawned


def test_launch_real_process(tmp_path: Path) -> None:
    marker = tmp_path / "marker"
    script = tmp_path / "touch.py"
    script.write_text(
        "import pathlib, sys\npathlib.Path(sys.argv[1]).write_text('done')\n"
    )

    (process,) = launch([(sys.executable, f"{script}", f"{marker}")])

    assert process.returncode is None
    assert process.wait(timeout=30) == 0
    assert marker.read_text() == "done"


@pytest.fixture
def answered_stdin() -> Iterator[None]:
    read, write = os.pipe()
    os.write(write, b"yes\n")
    os.close(write)
    saved = os.dup(0)
    os.dup2(read, 0)
    os.close(read)
    try:
        yield
    finally:
        os.dup2(saved, 0)
        os.close(saved)


def test_launch_inherits_stdin(tmp_path: Path, answered_stdin: None) -> None:
    marker = tmp_path / "answer"
    script = tmp_path / "ask.py"
    script.write_text(
        "import pathlib, sys\n"
        "try:\n"
        "    answer = input()\n"
        "except EOFError:\n"
        "    answer = '<EOF>'\n"
        "pathlib.Path(sys.argv[1]).write_text(answer)\n"
    )

    (process,) = launch([(sys.executable, f"{script}", f"{marker}")])

    assert process.wait(timeout=30) == 0
    assert marker.read_text() == "yes"


def test_missing_scripts(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "generate_config.py").write_text("")

    missing = missing_scripts(tmp_path)

    assert missing == [
        tmp_path / "generate_included_readme.py",
        tmp_path / "generate_commit.py",
    ]
    assert f"follow-up script {tmp_path / 'generate_commit.py'} not found" in (
        caplog.text
    )
    assert f"{tmp_path / 'generate_config.py'} not found" not in caplog.text
