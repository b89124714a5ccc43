from __future__ import annotations

from pathlib import Path

import click


class GenerateError(click.ClickException):
    exit_code = 1


class MissingVersion(GenerateError):
    def __init__(self) -> None:
        super().__init__('expected Cypress version argument like "3.8.3"')


class InvalidVersion(GenerateError):
    def __init__(self, version: str) -> None:
        super().__init__(
            f'expected Cypress version argument like "3.8.3" but it was "{version}"'
        )
        self.version = version


class MissingBaseImage(GenerateError):
    def __init__(self) -> None:
        super().__init__(
            "expected base Docker image tag like "
            '"cypress/browsers:node12.6.0-chrome77"'
        )


class InvalidBaseImageNamespace(GenerateError):
    def __init__(self, base_image: str, prefix: str) -> None:
        super().__init__(
            f'expected the base Docker image tag to be one of "{prefix}*" '
            f'but it was "{base_image}"'
        )
        self.base_image = base_image
        self.prefix = prefix


class WriteFailed(GenerateError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"failed to write {path}")
        self.path = path


class InvalidBaseImageTag(InvalidBaseImageNamespace):
    def __init__(self, base_image: str, prefix: str) -> None:
        GenerateError.__init__(
            self,
            f'expected a Docker tag without "/" after "{prefix}" '
            f'but it was "{base_image}"',
        )
        self.base_image = base_image
        self.prefix = prefix
