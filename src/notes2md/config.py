"""Configuration for the notes2md conversion pipeline."""
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Notes2MdConfig(BaseModel):
    """Settings read from the environment (or a local .env file)."""

    title_max_length: int = Field(
        default_factory=lambda: int(os.getenv("NOTES2MD_TITLE_MAX_LENGTH", "200")),
        gt=0,
        validate_default=True,
    )
    note_extension: str = Field(
        default_factory=lambda: os.getenv("NOTES2MD_NOTE_EXTENSION", "md"),
        min_length=1,
        validate_default=True,
    )


config = Notes2MdConfig()
