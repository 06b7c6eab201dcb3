"""
Editing of package.json manifests in the generated workspace.
"""
import json
import logging
import os
import shutil
from typing import Iterable, List, Optional

from ..UTILS.console import Task, highlight, task

logger = logging.getLogger(__name__)


def remove_packages(packages: Iterable[str], package_path: str, project_dir: str,
                    reporter: Optional[Task] = None) -> List[str]:
    """
    Removes dependencies from a workspace package's manifest.

    The manifest is only rewritten when something was removed. A missing
    manifest is left alone.

    :param packages: Dependency names to remove.
    :param package_path: Workspace package directory, relative to the project.
    :param project_dir: Root of the generated project.
    :param reporter: Running step to report removals to.
    :return: The dependencies that were removed.
    """
    manifest_path = os.path.join(project_dir, package_path, "package.json")
    if not os.path.exists(manifest_path):
        logger.debug("No manifest at %s", manifest_path)
        return []

    with open(manifest_path, 'r', encoding='utf-8') as f:
        manifest = json.load(f)

    dependencies = manifest.get("dependencies") or {}
    removed = []
    for dep in packages:
        if dep in dependencies:
            del dependencies[dep]
            removed.append(dep)
            if reporter:
                reporter.message(f"Removed {highlight(dep)} from {package_path}/package.json")

    if removed:
        with open(manifest_path, 'w', encoding='utf-8') as f:
            json.dump(manifest, f, indent=2, ensure_ascii=False)
            f.write("\n")

    return removed


def remove_react_email(project_dir: str, scope: str) -> List[str]:
    """
    Interactive step: removes the email package and the api's references to it.

    :param project_dir: Root of the generated project.
    :param scope: Scope the workspace packages currently use.
    :return: The dependencies removed from the api package.
    """
    with task("Removing react-email...", "Failed to remove react-email") as t:
        email_package = os.path.join(project_dir, "packages", "email")
        if os.path.exists(email_package):
            shutil.rmtree(email_package)
            t.message(f"Removed {highlight(os.path.join('packages', 'email'))}")

        removed = remove_packages(
            ["@react-email/components", f"{scope}/email"], "packages/api", project_dir, t
        )
        t.done("Removed react-email")
    return removed
