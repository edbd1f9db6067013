from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from lint_review.errors import CheckoutMismatchError, DiffResolutionError
from lint_review.scanners.command_runner import CommandResult
from lint_review.vcs import checkout, diff_resolver
from lint_review.vcs.checkout import current_head, ensure_checked_out
from lint_review.vcs.diff_resolver import filter_lintable, resolve_changed_files


def test_filter_keeps_lintable_files_under_prefix() -> None:
    paths = [
        "pkg/a.ts",
        "pkg/src/b.tsx",
        "pkg/c.js",
        "pkg/d.jsx",
        "pkg/readme.md",
        "pkg/styles.css",
        "pkg/types.d.ts",
        "other/e.ts",
        "pkgx/f.ts",
        "g.ts",
        "pkg/a.ts",
        "pkg/data.json",
        "pkg/script.mjs",
    ]

    assert filter_lintable(paths, "pkg") == ["a.ts", "src/b.tsx", "c.js", "d.jsx", "types.d.ts"]


def test_filter_tolerates_slashes_around_prefix() -> None:
    assert filter_lintable(["web/app/x.ts"], "/web/app/") == ["x.ts"]


def test_runs_git_diff_with_filter(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list = []

    def run_command(command: list[str], cwd: Path, timeout_s: float = 120) -> CommandResult:
        calls.append(command)
        return CommandResult(command, str(cwd), 0, "pkg/a.ts\0pkg/b.ts\0docs/x.md\0", "")

    monkeypatch.setattr(diff_resolver, "run_command", run_command)

    assert resolve_changed_files("A", "B", "pkg", tmp_path) == ["a.ts", "b.ts"]
    assert calls == [["git", "diff", "-z", "--name-only", "--diff-filter=ACMR", "A..B"]]


def test_git_failure_is_fatal(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def run_command(command: list[str], cwd: Path, timeout_s: float = 120) -> CommandResult:
        return CommandResult(command, str(cwd), 128, "", "fatal: bad revision 'A..B'")

    monkeypatch.setattr(diff_resolver, "run_command", run_command)

    with pytest.raises(DiffResolutionError) as excinfo:
        resolve_changed_files("A", "B", "pkg", tmp_path)

    assert excinfo.value.exit_code == 128
    assert "bad revision" in str(excinfo.value)


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(repo: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", "-c", "user.name=test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return proc.stdout.strip()


@requires_git
def test_resolves_against_real_repository(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    (repo / "pkg").mkdir(parents=True)
    _git(repo, "init", "-q")
    (repo / "pkg" / "keep.ts").write_text("export const a = 1;\n", encoding="utf-8")
    (repo / "pkg" / "gone.ts").write_text("export const b = 1;\n", encoding="utf-8")
    _git(repo, "add", "-A")
    _git(repo, "commit", "-q", "-m", "base")
    base = _git(repo, "rev-parse", "HEAD")

    (repo / "pkg" / "keep.ts").write_text("export const a = 2;\n", encoding="utf-8")
    (repo / "pkg" / "gone.ts").unlink()
    (repo / "pkg" / "new.tsx").write_text("export default 1;\n", encoding="utf-8")
    (repo / "pkg" / "notes.md").write_text("notes\n", encoding="utf-8")
    (repo / "outside.ts").write_text("1;\n", encoding="utf-8")
    _git(repo, "add", "-A")
    _git(repo, "commit", "-q", "-m", "head")
    head = _git(repo, "rev-parse", "HEAD")

    assert sorted(resolve_changed_files(base, head, "pkg", repo)) == ["keep.ts", "new.tsx"]


@requires_git
def test_unknown_sha_in_real_repository_is_fatal(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")

    with pytest.raises(DiffResolutionError):
        resolve_changed_files("deadbeef", "cafebabe", "pkg", repo)


def _commit_all(repo: Path, message: str) -> str:
    _git(repo, "add", "-A")
    _git(repo, "commit", "-q", "-m", message)
    return _git(repo, "rev-parse", "HEAD")


@requires_git
def test_non_ascii_and_spaced_names_are_not_dropped(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    (repo / "pkg").mkdir(parents=True)
    _git(repo, "init", "-q")
    (repo / "pkg" / "plain.ts").write_text("export const a = 1;\n", encoding="utf-8")
    base = _commit_all(repo, "base")

    (repo / "pkg" / "plain.ts").write_text("export const a = 2;\n", encoding="utf-8")
    (repo / "pkg" / "café.ts").write_text("export const c = 1;\n", encoding="utf-8")
    (repo / "pkg" / "my file.tsx").write_text("export default 1;\n", encoding="utf-8")
    head = _commit_all(repo, "head")

    assert sorted(resolve_changed_files(base, head, "pkg", repo)) == ["café.ts", "my file.tsx", "plain.ts"]


@requires_git
def test_checkout_guard_accepts_matching_head(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    (repo / "a.ts").write_text("1;\n", encoding="utf-8")
    head = _commit_all(repo, "head")

    assert current_head(repo) == head
    ensure_checked_out(repo, head.upper())


@requires_git
def test_checkout_guard_rejects_other_revision(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    (repo / "a.ts").write_text("1;\n", encoding="utf-8")
    base = _commit_all(repo, "base")
    (repo / "a.ts").write_text("2;\n", encoding="utf-8")
    head = _commit_all(repo, "head")
    _git(repo, "checkout", "-q", base)

    with pytest.raises(CheckoutMismatchError) as excinfo:
        ensure_checked_out(repo, head)

    assert excinfo.value.actual == base
    assert excinfo.value.expected == head


def test_checkout_guard_outside_a_repository_is_fatal(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def run_command(command: list[str], cwd: Path, timeout_s: float = 120) -> CommandResult:
        return CommandResult(command, str(cwd), 128, "", "fatal: not a git repository")

    monkeypatch.setattr(checkout, "run_command", run_command)

    with pytest.raises(DiffResolutionError):
        ensure_checked_out(tmp_path, "abc123")
