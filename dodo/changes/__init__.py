"""Change classification and commit message synthesis."""

from .collector import classify
from .models import ChangeSet, FileChangeRecord, FileState
from .synthesizer import classify_action, classify_scope, synthesize

__all__ = [
    "ChangeSet",
    "FileChangeRecord",
    "FileState",
    "classify",
    "classify_action",
    "classify_scope",
    "synthesize",
]
