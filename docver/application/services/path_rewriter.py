"""Recomputes version file paths after a document rename."""

import logging
import posixpath
from typing import List, Literal, Sequence, Tuple

from docver.application.services.exceptions import PathRewriteError
from docver.domain.models import DomainVersion, PathChange

PATH_SEPARATOR = "/"

RewriteMode = Literal["reconstruct", "substitute"]


def split_folder_and_filename(file_path: str) -> Tuple[List[str], str, str]:
    """Split ``file_path`` into (ancestor segments, folder, filename).

    Raises:
        PathRewriteError: If the path has no folder segment or no filename
    """
    segments = file_path.split(PATH_SEPARATOR)
    if len(segments) < 2:
        raise PathRewriteError(file_path, "no folder segment")

    filename = segments.pop()
    folder = segments.pop()
    if not filename:
        raise PathRewriteError(file_path, "empty filename")
    if not folder:
        raise PathRewriteError(file_path, "empty folder segment")
    return segments, folder, filename


def rename_filename(filename: str, old_name: str, new_name: str, mode: RewriteMode) -> str:
    """Derive the filename a version gets when its document is renamed.

    ``substitute`` replaces every occurrence of ``old_name`` in the filename.
    ``reconstruct`` rebuilds it from ``new_name`` and the original extension,
    keeping whatever followed ``old_name`` when the stem starts with it::

        Report.docx      -> Report2.docx
        Report_v2.docx   -> Report2_v2.docx
        scan-0001.pdf    -> Report2.pdf
    """
    if mode == "substitute":
        return filename.replace(old_name, new_name)

    stem, extension = posixpath.splitext(filename)
    if stem.startswith(old_name):
        return new_name + stem[len(old_name):] + extension
    return new_name + extension


def rewrite_path(file_path: str, new_name: str, mode: RewriteMode = "reconstruct") -> str:
    """Return ``file_path`` moved under a folder called ``new_name``.

    Ancestor segments are kept as they are; the folder segment becomes
    ``new_name`` and the filename is renamed with ``rename_filename``.

    >>> rewrite_path("docs/A/A.pdf", "B")
    'docs/B/B.pdf'
    """
    ancestors, old_folder, filename = split_folder_and_filename(file_path)
    new_filename = rename_filename(filename, old_folder, new_name, mode)
    return PATH_SEPARATOR.join(ancestors + [new_name, new_filename])


class PathRewriter:
    """Plans the path changes of a rename cascade.

    The rewriter is pure: it never touches the store. The repository persists
    the returned ``PathChange`` list inside the rename transaction.
    """

    def __init__(self, mode: RewriteMode = "reconstruct"):
        if mode not in ("reconstruct", "substitute"):
            raise ValueError(f"Unknown path rewrite mode: {mode}")
        self.mode = mode
        self.logger = logging.getLogger(__name__)

    def plan(self, versions: Sequence[DomainVersion], new_name: str) -> List[PathChange]:
        """Compute the new path of every version, in the order given.

        Versions whose path is already correct are still listed so callers see
        the full fan-out of the rename.

        Raises:
            PathRewriteError: If any version path cannot be rewritten
        """
        changes = []
        for version in versions:
            new_path = rewrite_path(version.file_path, new_name, self.mode)
            self.logger.debug(
                f"Version {version.id}: {version.file_path!r} -> {new_path!r}"
            )
            changes.append(PathChange(version.id, version.file_path, new_path))
        return changes
