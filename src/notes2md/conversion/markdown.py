"""Render notes as Markdown with YAML front-matter and write them to disk."""
import logging
from pathlib import Path

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from notes2md.conversion.paths import resolve_note_path
from notes2md.errors import ErrorKind, Notes2MdError
from notes2md.models.schema import MarkdownMeta, MarkdownNote

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


class FrontmatterDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


yaml_handler = YAMLHandler()


def dump_frontmatter(meta: MarkdownMeta) -> str:
    """Render the front-matter mapping, keys in model order."""
    return yaml_handler.export(
        meta.to_frontmatter(),
        Dumper=FrontmatterDumper,
        sort_keys=False,
        width=float("inf"),
    )


def serialize_markdown(markdown: MarkdownNote) -> str:
    """Render ``markdown`` in the canonical layout.

    The front-matter block is opened and closed by ``---`` lines and is
    followed directly by the content and a single trailing newline.
    """
    try:
        metadata = dump_frontmatter(markdown.meta)
    except yaml.YAMLError as e:
        raise Notes2MdError(ErrorKind.INVALID_DATA, f"YAML ERROR: {e}") from e

    return (
        f"{FRONTMATTER_DELIMITER}\n{metadata}\n{FRONTMATTER_DELIMITER}\n"
        f"{markdown.content}\n"
    )


def serialize_markdown_bytes(markdown: MarkdownNote) -> bytes:
    """Serialize ``markdown`` and encode it as UTF-8."""
    text = serialize_markdown(markdown)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise Notes2MdError(
            ErrorKind.INVALID_DATA,
            f"note content is not encodable as UTF-8: {e}",
        ) from e


def parse_markdown(text: str) -> MarkdownNote:
    """Read a document produced by :func:`serialize_markdown`.

    python-frontmatter strips surrounding whitespace from the content, so
    only the metadata survives a round trip byte for byte.
    """
    post = frontmatter.loads(text)
    return MarkdownNote(meta=MarkdownMeta(**post.metadata), content=post.content)


def write_markdown(markdown: MarkdownNote, dest_dir: Path) -> Path:
    """Write ``markdown`` into ``dest_dir`` without overwriting anything.

    Returns the path of the new file.
    """
    data = serialize_markdown_bytes(markdown)
    file_path = resolve_note_path(dest_dir, markdown.meta.title)

    # "x" refuses to clobber a file created after the existence check
    with open(file_path, "xb") as f:
        f.write(data)

    logger.info(f"Wrote {file_path}")
    return file_path
