"""
Unit tests for scope rewriting.
"""
import os
from ctk.MANAGERS.scope_manager import iter_project_files, replace_scope, rewrite_scope


def write(path, content, mode="w"):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, mode) as f:
        f.write(content)


class TestRewriteScope:
    """Tests for rewrite_scope."""

    def test_replaces_all_occurrences(self, tmp_path):
        write(tmp_path / "packages" / "api" / "package.json",
              '{"name": "@acme/api", "dependencies": {"@acme/db": "workspace:*"}}')
        changed = rewrite_scope(str(tmp_path), "@my-org")

        content = (tmp_path / "packages" / "api" / "package.json").read_text()
        assert content == '{"name": "@my-org/api", "dependencies": {"@my-org/db": "workspace:*"}}'
        assert changed == [str(tmp_path / "packages" / "api" / "package.json")]

    def test_untouched_files_are_not_rewritten(self, tmp_path):
        write(tmp_path / "README.md", "# Hello\n")
        before = os.stat(tmp_path / "README.md").st_mtime_ns
        assert rewrite_scope(str(tmp_path), "@my-org") == []
        assert os.stat(tmp_path / "README.md").st_mtime_ns == before

    def test_skips_ignored_directories_and_lockfiles(self, tmp_path):
        for ignored in ["node_modules/x/index.js", ".turbo/cache.txt", "dist/out.js",
                        ".next/build.js", "apps/web/pnpm-lock.yaml", "yarn.lock"]:
            write(tmp_path / ignored, "@acme/ui")
        write(tmp_path / "apps" / "web" / "page.tsx", 'import { Button } from "@acme/ui";\n')

        changed = rewrite_scope(str(tmp_path), "~")

        assert changed == [str(tmp_path / "apps" / "web" / "page.tsx")]
        assert (tmp_path / "node_modules" / "x" / "index.js").read_text() == "@acme/ui"
        assert (tmp_path / "yarn.lock").read_text() == "@acme/ui"
        assert (tmp_path / "apps" / "web" / "page.tsx").read_text() == 'import { Button } from "~/ui";\n'

    def test_skips_hidden_files(self, tmp_path):
        write(tmp_path / ".env.example", "SCOPE=@acme\n")
        write(tmp_path / ".github" / "ci.yml", "run: pnpm --filter @acme/web build\n")
        assert rewrite_scope(str(tmp_path), "@my-org") == []

    def test_skips_binary_files(self, tmp_path):
        write(tmp_path / "logo.png", b"\x89PNG\r\n\x1a\n\xff\xfe@acme", mode="wb")
        assert rewrite_scope(str(tmp_path), "@my-org") == []
        assert (tmp_path / "logo.png").read_bytes().endswith(b"@acme")

    def test_skips_broken_symlinks(self, tmp_path):
        write(tmp_path / "index.ts", 'export * from "@acme/db";\n')
        os.symlink(str(tmp_path / "missing.ts"), str(tmp_path / "broken.ts"))

        changed = rewrite_scope(str(tmp_path), "@my-org")

        assert changed == [str(tmp_path / "index.ts")]
        assert (tmp_path / "index.ts").read_text() == 'export * from "@my-org/db";\n'

    def test_custom_placeholder(self, tmp_path):
        write(tmp_path / "package.json", '{"name": "@template/root"}')
        rewrite_scope(str(tmp_path), "@my-org", placeholder="@template")
        assert (tmp_path / "package.json").read_text() == '{"name": "@my-org/root"}'

    def test_preserves_line_endings(self, tmp_path):
        write(tmp_path / "index.ts", b'export * from "@acme/db";\r\n', mode="wb")
        rewrite_scope(str(tmp_path), "@my-org")
        assert (tmp_path / "index.ts").read_bytes() == b'export * from "@my-org/db";\r\n'


def test_iter_project_files(tmp_path):
    write(tmp_path / "b.txt", "")
    write(tmp_path / "a" / "c.txt", "")
    write(tmp_path / "node_modules" / "d.txt", "")
    files = [os.path.relpath(p, tmp_path) for p in iter_project_files(str(tmp_path))]
    assert sorted(files) == [os.path.join("a", "c.txt"), "b.txt"]


def test_replace_scope(tmp_path):
    write(tmp_path / "package.json", '{"name": "@acme/root"}')
    assert len(replace_scope(str(tmp_path), "@my-org")) == 1
