from __future__ import annotations

import logging

import click

from . import generate


@click.command()
@click.argument("version", required=False)
@click.argument("base_image", metavar="BASE_IMAGE", required=False)
def main(version: str | None, base_image: str | None) -> None:
    """Generate included/VERSION with a Dockerfile, README and build script.

    Afterwards scripts/generate_config.py, scripts/generate_included_readme.py
    and scripts/generate_commit.py are started from the current directory
    without waiting for them; they must exist there.

    \b
    example:
        python -m includedimage 3.8.3 cypress/browsers:node12.6.0-chrome77
    """
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    generate(version, base_image)


if __name__ == "__main__":
    main()
