"""Tests for the changes/synthesizer module."""

import itertools

import pytest

from dodo.changes.synthesizer import (
    EMPTY_MESSAGE,
    classify_action,
    classify_scope,
    synthesize,
)


class TestSynthesizeScenarios:
    """End-to-end message examples."""

    def test_single_go_file_added(self):
        assert synthesize(["main.go"], [], []) == "feat(go): add main.go"

    def test_two_python_files_modified(self):
        assert synthesize([], ["a.py", "b.py"], []) == "fix(py): update 2 files"

    def test_test_scope_with_doc_and_go(self):
        message = synthesize(["x.md"], ["y_test.go"], [])

        assert message == "feat(test): add x.md, update y_test.go"

    def test_two_js_files_deleted(self):
        assert synthesize([], [], ["old.js", "older.js"]) == "refactor(js): remove 2 files"

    def test_empty_input(self):
        assert synthesize([], [], [], "") == "chore: update files"
        assert synthesize([], [], []) == EMPTY_MESSAGE

    def test_basename_used_for_single_file(self):
        assert synthesize(["cmd/server/main.go"], [], []) == "feat(go): add main.go"

    def test_no_scope(self):
        assert synthesize([], ["LICENSE"], []) == "fix: update LICENSE"


class TestOverride:
    """A user-supplied message is returned untouched."""

    @pytest.mark.parametrize(
        "added,modified,deleted",
        [
            ([], [], []),
            (["main.go"], [], []),
            (["a.py"], ["b.py"], ["c.py"]),
        ],
    )
    def test_override_short_circuits(self, added, modified, deleted):
        assert synthesize(added, modified, deleted, override="X") == "X"

    def test_override_verbatim(self):
        message = "  WIP: do not merge\n\nbody text "

        assert synthesize(["a.py"], [], [], override=message) == message

    def test_empty_override_is_ignored(self):
        assert synthesize(["main.go"], [], [], override="") == "feat(go): add main.go"
        assert synthesize(["main.go"], [], [], override=None) == "feat(go): add main.go"


class TestClassifyScope:
    """Tests for scope precedence."""

    def test_empty(self):
        assert classify_scope([]) == ""

    @pytest.mark.parametrize(
        "path",
        ["test_app.py", "helpers_test.py", "api_spec.rb", "src/Button.Spec.tsx", "LATEST.md"],
    )
    def test_test_marker(self, path):
        assert classify_scope([path]) == "test"

    def test_test_beats_everything(self):
        assert classify_scope(["main.go", "README.md", "setup.cfg", "app_test.go"]) == "test"

    def test_directory_name_does_not_count_as_test(self):
        assert classify_scope(["tests/helpers.go"]) == "go"

    @pytest.mark.parametrize(
        "paths,expected",
        [
            (["main.go"], "go"),
            (["App.tsx"], "ts"),
            (["index.ts"], "ts"),
            (["index.js"], "js"),
            (["app.py"], "py"),
            (["MAIN.GO"], "go"),
        ],
    )
    def test_language(self, paths, expected):
        assert classify_scope(paths) == expected

    def test_language_priority(self):
        assert classify_scope(["app.py", "index.js", "index.ts", "main.go"]) == "go"
        assert classify_scope(["app.py", "index.js", "index.ts"]) == "ts"
        assert classify_scope(["app.py", "index.js"]) == "js"

    def test_language_beats_docs_and_config(self):
        assert classify_scope(["README.md", "config.yaml", "app.py"]) == "py"

    @pytest.mark.parametrize("path", ["guide.md", "notes.txt", "index.rst", "README.md"])
    def test_docs(self, path):
        assert classify_scope([path]) == "docs"

    def test_docs_beat_config(self):
        assert classify_scope(["package.json", "CHANGELOG.md"]) == "docs"

    @pytest.mark.parametrize(
        "path",
        [
            "package.json",
            "ci.yaml",
            ".github/workflows/ci.yml",
            "pyproject.toml",
            "setup.ini",
            "nginx.conf",
            "Dockerfile",
            "Makefile",
        ],
    )
    def test_config(self, path):
        assert classify_scope([path]) == "config"

    def test_unknown_extension(self):
        assert classify_scope(["logo.png", "LICENSE"]) == ""

    def test_windows_separators(self):
        assert classify_scope(["docs\\index.rst"]) == "docs"


class TestClassifyAction:
    """Tests for the conventional commit type."""

    def test_feat_single(self):
        assert classify_action(["a.py"], [], []) == ("feat", "add a.py")

    def test_feat_plural(self):
        assert classify_action(["a.py", "b.py", "c.py"], ["d.py"], []) == ("feat", "add 3 files")

    def test_feat_on_tie_with_modified(self):
        assert classify_action(["a.py"], ["b.py"], []) == ("feat", "add a.py")

    def test_refactor_on_tie_with_deleted(self):
        assert classify_action(["a.py"], [], ["b.py"]) == ("refactor", "remove b.py")

    def test_refactor_when_deletions_present(self):
        assert classify_action([], ["a.py", "b.py"], ["c.py"]) == ("refactor", "remove c.py")

    def test_fix(self):
        assert classify_action([], ["a.py"], []) == ("fix", "update a.py")

    def test_fix_plural(self):
        assert classify_action(["a.py"], ["b.py", "c.py"], []) == ("fix", "update 2 files")


class TestSecondaryFragments:
    """Tests for the fragments after the lead."""

    def test_feat_mentions_updates(self):
        message = synthesize(["a.go", "b.go"], ["c.go"], [])

        assert message == "feat(go): add 2 files, update c.go"

    def test_feat_does_not_mention_deletions(self):
        message = synthesize(["a.go", "b.go"], [], ["c.go"])

        assert message == "feat(go): add 2 files"

    def test_refactor_mentions_adds_then_updates(self):
        message = synthesize(["new.py"], ["a.py", "b.py"], ["old.py"])

        assert message == "refactor(py): remove old.py, add new.py, update 2 files"

    def test_fix_mentions_adds(self):
        message = synthesize(["new.py"], ["a.py", "b.py"], [])

        assert message == "fix(py): update 2 files, add new.py"

    def test_fix_does_not_repeat_update(self):
        message = synthesize([], ["a.py"], [])

        assert message == "fix(py): update a.py"


class TestOrderIndependence:
    """Scope and action depend on the sets of paths, not their order."""

    def test_permutations(self):
        added = ["x.md", "lib/a.ts"]
        modified = ["Makefile", "b.py", "c.js"]
        deleted = ["old.go"]

        messages = {
            synthesize(list(a), list(m), list(d))
            for a in itertools.permutations(added)
            for m in itertools.permutations(modified)
            for d in itertools.permutations(deleted)
        }

        assert messages == {"refactor(go): remove old.go, add 2 files, update 3 files"}
