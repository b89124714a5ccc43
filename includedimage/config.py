from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path = Path("included")
    base_image_prefix: str = "cypress/browsers:"
    image_name: str = "cypress/included"
    category_label: str = "included"
    scripts: Path = Path("scripts")
