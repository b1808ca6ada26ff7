"""Request path resolution through the exact file, `.md` and README fallback chain."""

import posixpath
from dataclasses import replace
from pathlib import Path

from godown.content.errors import ContentNotFound
from godown.content.media_types import is_media
from godown.core.logger import LogIcon, logger
from godown.models.content import RenderRequest, ResolvedPath, Resolution

MARKDOWN_SUFFIX = ".md"
README_NAME = "README.md"


class PathResolver:
    """Maps request paths to files confined to a served root directory.

    Resolution order for a cleaned request path ``/p``:

    1. ``/`` is replaced by the index document.
    2. Media extensions resolve as-is, existence is checked when streaming.
    3. Without a ``.md`` suffix, an existing file ``p`` wins.
    4. ``p.md`` (or ``p`` itself when it already ends in ``.md``).
    5. ``p/README.md``, with the ``.md`` suffix dropped first.
    """

    def __init__(self, root: Path, index_file: str = README_NAME) -> None:
        self._root = root.resolve()
        self._index_file = index_file

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, request_path: str) -> ResolvedPath:
        """Resolve a percent-decoded request path or raise ContentNotFound."""
        request = RenderRequest(path=request_path)
        logical = self.normalize(request_path)
        target = self._confine(logical, request_path)

        if is_media(logical):
            return self._found(request, target, Resolution.AS_IS)

        if not logical.endswith(MARKDOWN_SUFFIX):
            if target.is_file():
                return self._found(request, target, Resolution.AS_IS)
            logical += MARKDOWN_SUFFIX
            target = self._confine(logical, request_path)

        if target.is_file():
            return self._found(request, target, Resolution.MARKDOWN)

        directory = logical.removesuffix(MARKDOWN_SUFFIX)
        readme = self._confine(posixpath.join(directory, README_NAME), request_path)
        if readme.is_file():
            return self._found(request, readme, Resolution.README)

        raise ContentNotFound(request_path)

    def normalize(self, request_path: str) -> str:
        """Clean a request path into an absolute logical path.

        ``..`` segments are collapsed against the leading slash, so the result
        never climbs above the root. Paths with NUL bytes are rejected.
        """
        if "\x00" in request_path:
            raise ContentNotFound(request_path, "invalid path")

        logical = posixpath.normpath("/" + request_path.lstrip("/"))
        if logical == "/":
            logical = posixpath.normpath("/" + self._index_file.lstrip("/"))
        return logical

    def _confine(self, logical: str, request_path: str) -> Path:
        """Join a logical path onto the root, refusing anything that escapes it."""
        candidate = self._root / logical.lstrip("/")
        try:
            real = candidate.resolve()
        except (OSError, RuntimeError) as ex:
            raise ContentNotFound(request_path, "unresolvable path") from ex

        if not real.is_relative_to(self._root):
            logger.warning("Rejected path outside served root", icon=LogIcon.FORBIDDEN, path=request_path)
            raise ContentNotFound(request_path, "outside served root")
        return candidate

    @staticmethod
    def _found(request: RenderRequest, path: Path, resolution: Resolution) -> ResolvedPath:
        return ResolvedPath(request=replace(request, resolved=str(path)), path=path, resolution=resolution)
