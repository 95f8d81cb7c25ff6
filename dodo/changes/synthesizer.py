"""Rule-based conventional commit messages from a change set."""

from collections.abc import Iterable, Sequence
from pathlib import PurePosixPath

EMPTY_MESSAGE = "chore: update files"

# Checked in order; the first language with any matching file wins.
LANGUAGE_SCOPES: tuple[tuple[str, frozenset[str]], ...] = (
    ("go", frozenset({".go"})),
    ("ts", frozenset({".ts", ".tsx"})),
    ("js", frozenset({".js"})),
    ("py", frozenset({".py"})),
)

DOC_EXTENSIONS = frozenset({".md", ".txt", ".rst"})
DOC_NAMES = frozenset({"readme.md"})

CONFIG_EXTENSIONS = frozenset({".json", ".yaml", ".yml", ".toml", ".ini", ".conf"})
CONFIG_NAMES = frozenset({"dockerfile", "makefile"})

TEST_MARKERS = ("test", "spec")


def _split(path: str) -> tuple[str, str]:
    """Lowercase basename and extension of a repository path."""
    name = PurePosixPath(path.replace("\\", "/")).name.lower()
    return name, PurePosixPath(name).suffix


def _basename(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).name


def classify_scope(paths: Iterable[str]) -> str:
    """
    Infer a commit scope from the touched paths.

    Precedence: test files, then source language (go, ts, js, py), then
    docs, then config. Returns an empty string when nothing matches.
    """
    files = [_split(p) for p in paths]

    if any(marker in name for name, _ in files for marker in TEST_MARKERS):
        return "test"

    extensions = {ext for _, ext in files}
    for scope, markers in LANGUAGE_SCOPES:
        if extensions & markers:
            return scope

    if any(ext in DOC_EXTENSIONS or name in DOC_NAMES for name, ext in files):
        return "docs"

    if any(ext in CONFIG_EXTENSIONS or name in CONFIG_NAMES for name, ext in files):
        return "config"

    return ""


def _fragment(verb: str, paths: Sequence[str]) -> str:
    if len(paths) == 1:
        return f"{verb} {_basename(paths[0])}"
    return f"{verb} {len(paths)} files"


def classify_action(
    added: Sequence[str],
    modified: Sequence[str],
    deleted: Sequence[str],
) -> tuple[str, str]:
    """
    Pick the conventional commit type and its lead fragment.

    Additions win when they outnumber deletions and are at least as many as
    modifications; any deletion otherwise makes it a refactor; everything
    else is a fix.

    Returns:
        Tuple of (commit type, lead fragment).
    """
    if len(added) >= len(modified) and len(added) > len(deleted):
        return "feat", _fragment("add", added)
    if deleted:
        return "refactor", _fragment("remove", deleted)
    return "fix", _fragment("update", modified)


def synthesize(
    added: Sequence[str],
    modified: Sequence[str],
    deleted: Sequence[str],
    override: str | None = None,
) -> str:
    """
    Build a commit message for the given changes.

    Args:
        added: Paths newly introduced.
        modified: Paths with content changes.
        deleted: Paths removed.
        override: User-supplied message; returned as-is when non-empty.

    Returns:
        Message such as "feat(go): add main.go".
    """
    if override:
        return override

    if not (added or modified or deleted):
        return EMPTY_MESSAGE

    scope = classify_scope([*added, *modified, *deleted])
    action, lead = classify_action(added, modified, deleted)

    fragments = [lead]
    if added and action != "feat":
        fragments.append(_fragment("add", added))
    if modified and action != "fix":
        fragments.append(_fragment("update", modified))

    summary = ", ".join(fragments)
    if scope:
        return f"{action}({scope}): {summary}"
    return f"{action}: {summary}"
