"""Resolution of wiki link targets to file identifiers."""

from __future__ import annotations

import posixpath
from collections import defaultdict
from collections.abc import Iterable
from typing import Protocol

from notegraph.wikilink import WikiLink

_MD_EXT = ".md"


class LinkTarget(Protocol):
    """Anything with a vault-relative path and an identifier."""

    @property
    def path(self) -> str: ...

    @property
    def id(self) -> str: ...


def _strip_md(path: str) -> str:
    return path[: -len(_MD_EXT)] if path.endswith(_MD_EXT) else path


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _dirname(path: str) -> str:
    return _clean(path[: path.rfind("/") + 1])


def _basename(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _join(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    return _clean(joined) if joined else ""


def normalize_for_matching(s: str) -> str:
    """Normalise a name for fuzzy matching."""
    s = s.lower()
    s = s.removeprefix("~") if hasattr(s, "removeprefix") else s
    s = s.removeprefix("+")
    s = s.replace("-", " ").replace("_", " ")
    return " ".join(s.split())


class LinkResolver:
    """Maps link targets onto registered files."""

    def __init__(self) -> None:
        self._path_to_id: dict[str, str] = {}
        self._basename_to_ids: defaultdict[str, list[str]] = defaultdict(list)
        self._normalized_to_ids: defaultdict[str, list[str]] = defaultdict(list)
        self._id_to_path: dict[str, str] = {}

    def add_file(self, file: LinkTarget) -> None:
        """Register a file for later resolution."""
        file_id = file.id
        path = file.path
        path_without_ext = _strip_md(path)

        self._path_to_id[path_without_ext] = file_id
        self._id_to_path[file_id] = path

        basename = _basename(path_without_ext)
        self._basename_to_ids[basename].append(file_id)
        self._normalized_to_ids[normalize_for_matching(basename)].append(file_id)

    def resolve_link(self, target: str, source_file: str = "") -> str | None:
        """Return the id the target refers to, or None if nothing matches."""
        target = target.strip()

        found = self._exact_match(target)
        if found is not None:
            return found

        target_without_ext = _strip_md(target)
        found = self._relative_match(target_without_ext, source_file)
        if found is not None:
            return found

        basename = _basename(target_without_ext)
        found = self._best_match(self._basename_to_ids.get(basename, []), source_file)
        if found is not None:
            return found

        normalized = normalize_for_matching(basename)
        return self._best_match(self._normalized_to_ids.get(normalized, []), source_file)

    def _exact_match(self, target: str) -> str | None:
        if target in self._path_to_id:
            return self._path_to_id[target]
        return self._path_to_id.get(_strip_md(target))

    def _relative_match(self, target_without_ext: str, source_file: str) -> str | None:
        if not source_file:
            return None
        relative = _clean(_join(_dirname(source_file), target_without_ext))
        return self._path_to_id.get(relative)

    def _best_match(self, ids: list[str], source_file: str) -> str | None:
        if not ids:
            return None
        if len(ids) == 1:
            return ids[0]
        if source_file:
            source_dir = _dirname(source_file)
            for file_id in ids:
                path = self._id_to_path.get(file_id)
                if path is not None and _dirname(path) == source_dir:
                    return file_id
        return ids[0]

    def resolve_links(
        self, links: Iterable[WikiLink], source_file: str = ""
    ) -> tuple[dict[str, str], list[WikiLink]]:
        """Split links into a target-to-id mapping and the unresolved rest."""
        resolved: dict[str, str] = {}
        unresolved: list[WikiLink] = []
        for link in links:
            file_id = self.resolve_link(link.target, source_file)
            if file_id is not None:
                resolved[link.target] = file_id
            else:
                unresolved.append(link)
        return resolved, unresolved

    def get_path(self, file_id: str) -> str | None:
        """Return the path registered for an id, or None."""
        return self._id_to_path.get(file_id)

    def stats(self) -> dict[str, int]:
        """Return counts of files, distinct basenames and duplicate basenames."""
        return {
            "total_files": len(self._id_to_path),
            "unique_basenames": len(self._basename_to_ids),
            "duplicate_names": sum(
                len(ids) - 1 for ids in self._basename_to_ids.values() if len(ids) > 1
            ),
        }