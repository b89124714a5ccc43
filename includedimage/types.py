import re
from typing import NamedTuple, Self

_NUMERIC = r"0|[1-9][0-9]*"
_IDENTIFIER = rf"(?:{_NUMERIC}|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_IDENTIFIER}(?:\.{_IDENTIFIER})*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)


class Semver(NamedTuple):
    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    @classmethod
    def parse(cls, s: str) -> Self:
        if (matched := SEMVER_PATTERN.fullmatch(s)) is None:
            raise ValueError(f"{s!r} does not match {SEMVER_PATTERN.pattern}")
        return cls(
            major=int(matched.group("major")),
            minor=int(matched.group("minor")),
            patch=int(matched.group("patch")),
            prerelease=matched.group("prerelease"),
            build=matched.group("build"),
        )

    def __str__(self) -> str:
        s = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            s += f"-{self.prerelease}"
        if self.build is not None:
            s += f"+{self.build}"
        return s


class BaseImage(NamedTuple):
    repository: str
    tag: str

    @classmethod
    def parse(cls, s: str) -> Self:
        repository, colon, tag = s.partition(":")
        if not colon:
            raise ValueError(f"{s!r} has no tag")
        return cls(repository=repository, tag=tag)

    def __str__(self) -> str:
        return f"{self.repository}:{self.tag}"
