from __future__ import annotations

from logging import getLogger
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .types import BaseImage, Semver
from .util import make_executable, trimmed, writing

logger = getLogger(__name__)

DOCKERFILE = "Dockerfile"
README = "README.md"
BUILD_SCRIPT = "build.sh"

GENERATOR = "includedimage"
BLOG_POST_URL = (
    "https://www.cypress.io/blog/2019/05/02/run-cypress-with-a-single-docker-command/"
)
ARM64_ISSUE_URL = "https://github.com/cypress-io/cypress-docker-images/issues/695"


class Artifacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    dockerfile: str
    readme: str
    build_script: str

    @property
    def files(self) -> dict[str, str]:
        return {
            DOCKERFILE: self.dockerfile,
            README: self.readme,
            BUILD_SCRIPT: self.build_script,
        }


def regenerate_cmd(version: Semver, base_image: BaseImage) -> str:
    return f"python -m {GENERATOR} {version!s} {base_image!s}"


def render(
    category: str,
    version: Semver,
    base_image: BaseImage,
    *,
    image_name: str = "cypress/included",
) -> Artifacts:
    return Artifacts(
        dockerfile=dockerfile(category, version, base_image, image_name=image_name),
        readme=readme(category, version, base_image, image_name=image_name),
        build_script=build_script(
            category, version, base_image, image_name=image_name
        ),
    )


def persist(output: Path, artifacts: Artifacts) -> list[Path]:
    """Write every artifact into ``output``, overwriting existing files.

    Writes are not transactional: if one fails with ``WriteFailed`` the
    files saved before it stay on disk, and rerunning overwrites them.
    """
    saved = []
    for name, text in artifacts.files.items():
        with writing(output / name) as path:
            path.write_text(text, encoding="utf-8", newline="")
            if name == BUILD_SCRIPT:
                make_executable(path)
        logger.info("Saved %s", path)
        saved.append(path)
    return saved


@trimmed
def dockerfile(
    category: str, version: Semver, base_image: BaseImage, *, image_name: str
) -> str:
    return f"""
# WARNING: this file was autogenerated by {GENERATOR}
# using
#   {regenerate_cmd(version, base_image)}
#
# build this image with command
#   docker build -t {image_name}:{category} .
#
FROM {base_image!s}

# avoid too many progress messages
# https://github.com/cypress-io/cypress/issues/1243
ENV CI=1 \\
# disable shared memory X11 affecting Cypress v4 and Chrome
# https://github.com/cypress-io/cypress-docker-images/issues/270
  QT_X11_NO_MITSHM=1 \\
  _X11_NO_MITSHM=1 \\
  _MITSHM=0 \\
  # point Cypress at the /root/cache no matter what user account is used
  # see https://on.cypress.io/caching
  CYPRESS_CACHE_FOLDER=/root/.cache/Cypress \\
  # Allow projects to reference globally installed cypress
  NODE_PATH=/usr/local/lib/node_modules

# should be root user
RUN echo "whoami: $(whoami)" \\
  && npm config -g set user $(whoami) \\
  # command "id" should print:
  # uid=0(root) gid=0(root) groups=0(root)
  # which means the current user is root
  && id \\
  && npm install -g typescript \\
  && npm install -g "cypress@{version!s}" \\
  && cypress verify \\
  # Cypress cache and installed version
  # should be in the root user's home folder
  && cypress cache path \\
  && cypress cache list \\
  && cypress info \\
  && cypress version \\
  # give every user read access to the "/root" folder where the binary is cached
  # we really only need to worry about the top folder, fortunately
  && ls -la /root \\
  && chmod 755 /root \\
  # always grab the latest Yarn
  # otherwise the base image might have old versions
  # NPM does not need to be installed as it is already included with Node.
  && npm i -g yarn@latest \\
  # Show where Node loads required modules from
  && node -p 'module.paths' \\
  # should print Cypress version
  # plus Electron and bundled Node versions
  && cypress version \\
  && echo  " node version:    $(node -v) \\n" \\
    "npm version:     $(npm -v) \\n" \\
    "yarn version:    $(yarn -v) \\n" \\
    "typescript version:  $(tsc -v) \\n" \\
    "debian version:  $(cat /etc/debian_version) \\n" \\
    "user:            $(whoami) \\n" \\
    "chrome:          $(google-chrome --version || true) \\n" \\
    "firefox:         $(firefox --version || true) \\n"

ENTRYPOINT ["cypress", "run"]
"""


@trimmed
def readme(
    category: str, version: Semver, base_image: BaseImage, *, image_name: str
) -> str:
    return f"""
<!--
WARNING: this file was autogenerated by {GENERATOR} using

    {regenerate_cmd(version, base_image)}
-->

# {image_name}:{category}

Read [Run Cypress with a single Docker command][blog post url]

## Run tests

```shell
$ docker run -it -v $PWD:/e2e -w /e2e {image_name}:{category}
# runs Cypress tests from the current folder
```

**Note:** Currently, the linux/arm64 build of this image does not contain any browsers except Electron. See {ARM64_ISSUE_URL} for more information.

[blog post url]: {BLOG_POST_URL}
"""


@trimmed
def build_script(
    category: str, version: Semver, base_image: BaseImage, *, image_name: str
) -> str:
    return f"""
# WARNING: this file was autogenerated by {GENERATOR}
# using
#   {regenerate_cmd(version, base_image)}
set -e

echo "Building {image_name}:{category}"
docker build -t {image_name}:{category} .
"""
