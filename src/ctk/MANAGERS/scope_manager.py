"""
Rewriting of the template's placeholder package scope.
"""
import logging
import os
from typing import Iterator, List

from ..UTILS.console import highlight, task

logger = logging.getLogger(__name__)

PLACEHOLDER_SCOPE = "@acme"

IGNORED_DIRS = {".git", "node_modules", ".turbo", "dist", ".next"}
IGNORED_FILES = {"pnpm-lock.yaml", "yarn.lock", "package-lock.json", "bun.lockb"}


def iter_project_files(project_dir: str) -> Iterator[str]:
    """
    Yields the files of a project that may reference the package scope.

    Build output, dependencies, lockfiles and hidden files are skipped.

    :param project_dir: Root of the generated project.
    """
    for root, dirs, files in os.walk(project_dir):
        dirs[:] = sorted(d for d in dirs if d not in IGNORED_DIRS and not d.startswith('.'))
        for name in sorted(files):
            if name in IGNORED_FILES or name.startswith('.'):
                continue
            yield os.path.join(root, name)


def rewrite_scope(project_dir: str, new_scope: str, placeholder: str = PLACEHOLDER_SCOPE) -> List[str]:
    """
    Replaces every occurrence of ``placeholder`` with ``new_scope``.

    :param project_dir: Root of the generated project.
    :param new_scope: The scope chosen by the user.
    :param placeholder: The scope used by the template.
    :return: Paths of the files that were changed.
    """
    changed = []
    for path in iter_project_files(project_dir):
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except UnicodeDecodeError:
            logger.debug("Skipping non-text file %s", path)
            continue
        except OSError as e:
            logger.debug("Skipping unreadable file %s: %s", path, e)
            continue

        if placeholder not in content:
            continue

        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content.replace(placeholder, new_scope))
        changed.append(path)

    logger.debug("Rewrote scope in %d file(s)", len(changed))
    return changed


def replace_scope(project_dir: str, new_scope: str, placeholder: str = PLACEHOLDER_SCOPE) -> List[str]:
    """
    Interactive step: applies the chosen scope to the generated project.
    """
    with task(f"Replacing scope with {highlight(new_scope)}...", "Failed to replace scope") as t:
        changed = rewrite_scope(project_dir, new_scope, placeholder)
        t.done(f"Replaced scope with {highlight(new_scope)}")
    return changed
