"""Turn note titles into safe, unique Markdown file paths."""
import logging
import re
from pathlib import Path
from typing import Optional

from notes2md.config import config
from notes2md.errors import ErrorKind, Notes2MdError

logger = logging.getLogger(__name__)

RE_BOGUS_FILENAME_CHARS = re.compile(r"[:?]")


def _invalid_title(title: str) -> Notes2MdError:
    return Notes2MdError(ErrorKind.INVALID_DATA, f"title: '{title}' is not valid for a filename")


def title_to_filepath(dest_dir: Path, title: str, extension: Optional[str] = None) -> Path:
    """Map ``title`` to a candidate file path inside ``dest_dir``.

    ``:`` and ``?`` become ``_``, and a URL-like title collapses to its last
    path segment. Any existing extension is replaced. The returned path may
    already exist; see :func:`increment_filepath_if_exists`.
    """
    if not title:
        raise _invalid_title(title)
    if extension is None:
        extension = config.note_extension

    cleaned = RE_BOGUS_FILENAME_CHARS.sub("_", title)
    cleaned = cleaned.lstrip(" .").strip()
    # Strip trailing slashes before splitting so "name/" keeps "name"
    cleaned = cleaned.rstrip("/")
    stem = cleaned.rsplit("/", 1)[-1].strip()
    if stem in ("", ".", ".."):
        raise _invalid_title(title)

    path = Path(dest_dir) / stem
    # A trailing dot is an empty extension and is replaced like any other
    if stem.endswith("."):
        return path.with_name(f"{stem[:-1]}.{extension}")
    return path.with_suffix(f".{extension}")


def increment_filepath_if_exists(file_path: Path) -> Path:
    """Return ``file_path`` or the first free ``<stem> (n)<suffix>`` sibling.

    The filesystem is checked for every candidate, so notes written earlier
    in the same run are taken into account.
    """
    file_path = Path(file_path)
    corrected_path = file_path
    i = 0
    while corrected_path.exists():
        i += 1
        corrected_path = file_path.with_name(f"{file_path.stem} ({i}){file_path.suffix}")

    if i:
        logger.debug(f"{file_path.name} already exists, using {corrected_path.name}")
    return corrected_path


def resolve_note_path(dest_dir: Path, title: str) -> Path:
    """Return a path for ``title`` in ``dest_dir`` that does not exist yet."""
    return increment_filepath_if_exists(title_to_filepath(dest_dir, title))
