from collections.abc import Sequence

import pytest


class FakeProcess:
    def __init__(self, cmd: Sequence[str]) -> None:
        self.args = tuple(cmd)

    def wait(self) -> int:
        raise AssertionError(f"{self.args} must not be waited on")

    def communicate(self) -> None:
        raise AssertionError(f"{self.args} must not be waited on")


@pytest.fixture
def spawned(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, ...]]:
    cmds: list[tuple[str, ...]] = []

    def spawn(cmd: Sequence[str]) -> FakeProcess:
        process = FakeProcess(cmd)
        cmds.append(process.args)
        return process

    monkeypatch.setattr("includedimage.delegate.spawn", spawn)
    return cmds
