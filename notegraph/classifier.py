"""Rule-based classification of vault notes into node types."""

from __future__ import annotations

import posixpath
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol

PRIORITY_TAG = 1
PRIORITY_FILENAME = 2
PRIORITY_PATH = 3

_MAX_PATH_BYTES = 500


class Frontmatter(Protocol):
    """Parsed frontmatter exposing its raw key/value mapping."""

    @property
    def raw(self) -> Optional[Mapping[str, Any]]: ...


class ClassifiableFile(Protocol):
    """A note with a vault-relative path and optional frontmatter."""

    @property
    def path(self) -> str: ...

    @property
    def frontmatter(self) -> Optional[Frontmatter]: ...


@dataclass(frozen=True)
class ClassificationRule:
    """A named predicate that assigns a node type; lower priority wins."""

    name: str
    priority: int
    matcher: Optional[Callable[[Any], bool]]
    node_type: str


class RuleValidationError(ValueError):
    """Raised when a classification rule is malformed."""

    def __init__(self, reason: str, rule_name: str = "", index: Optional[int] = None) -> None:
        self.reason = reason
        self.rule_name = rule_name
        self.index = index
        if rule_name:
            message = f"invalid rule {rule_name!r}: {reason}"
        elif index is not None:
            message = f"invalid rule at index {index}: {reason}"
        else:
            message = f"invalid rule: {reason}"
        super().__init__(message)


def validate_rules(rules: Iterable[ClassificationRule]) -> None:
    """Raise :class:`RuleValidationError` for the first invalid rule."""
    seen: set[str] = set()
    for index, rule in enumerate(rules):
        if not rule.name:
            raise RuleValidationError("empty name", index=index)
        if rule.name in seen:
            raise RuleValidationError("duplicate name", rule_name=rule.name)
        seen.add(rule.name)
        if rule.matcher is None or not callable(rule.matcher):
            raise RuleValidationError("nil matcher function", rule_name=rule.name)
        if not rule.node_type:
            raise RuleValidationError("empty node type", rule_name=rule.name)
        if rule.priority < 0:
            raise RuleValidationError("negative priority", rule_name=rule.name)


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _parent(path: str) -> str:
    head = posixpath.dirname(path)
    return _clean(head) if head else "."


def has_tag(file: ClassifiableFile, tag: str) -> bool:
    """Tell whether the file's frontmatter lists ``tag``, ignoring case."""
    frontmatter = file.frontmatter
    if frontmatter is None:
        return False
    raw = frontmatter.raw or {}
    if "tags" not in raw:
        return False

    wanted = tag.casefold()
    tags = raw["tags"]
    if isinstance(tags, str):
        return tags.casefold() == wanted
    if isinstance(tags, (list, tuple)):
        return any(isinstance(t, str) and t.casefold() == wanted for t in tags)
    return False


def is_in_directory(file_path: str, dir_name: str) -> bool:
    """Tell whether any component of ``file_path`` equals ``dir_name``, ignoring case."""
    if not dir_name:
        return False
    wanted = dir_name.casefold()
    current = _clean(file_path)
    while current not in (".", "/"):
        if posixpath.basename(current).casefold() == wanted:
            return True
        parent = _parent(current)
        if parent == current:
            break
        current = parent
    return False


def is_valid_path(path: str) -> bool:
    """Tell whether a vault-relative path is safe to classify."""
    if not path:
        return False
    if "\\" in path:
        return False
    if path.startswith("/"):
        return False
    if ".." in _clean(path):
        return False
    if "\x00" in path:
        return False
    if len(path.encode("utf-8")) > _MAX_PATH_BYTES:
        return False
    return True


class NodeClassifier:
    """Assigns node types to files using prioritised rules."""

    def __init__(
        self,
        rules: Iterable[ClassificationRule] = (),
        default_node_type: str = "",
    ) -> None:
        rule_list = list(rules)
        validate_rules(rule_list)
        self._rules = sorted(rule_list, key=lambda rule: rule.priority)
        self.default_node_type = default_node_type

    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        """The rules in evaluation order."""
        return tuple(self._rules)

    def classify_node(self, file: Optional[ClassifiableFile]) -> str:
        """Return the node type of the first matching rule, or the default."""
        if file is None or not is_valid_path(file.path):
            return self.default_node_type
        for rule in self._rules:
            if rule.matcher(file):
                return rule.node_type
        return self.default_node_type