"""
Invocation of the create-turbo generator.
"""
import os
from typing import List, Optional

from ..MODELS.project_options import PackageManager
from ..RUNNERS.process_runner import ProcessRunner
from ..UTILS.console import highlight, task
from ..UTILS.package_manager import get_runner

DEFAULT_TEMPLATE = "https://github.com/Badbird5907/turbo-kit"


def build_scaffold_command(project_name: str, package_manager: PackageManager,
                           template: str = DEFAULT_TEMPLATE) -> List[str]:
    """
    Builds the create-turbo command line for a project.

    :param project_name: Name of the directory to generate.
    :param package_manager: Package manager the workspace is set up for.
    :param template: Example repository passed to create-turbo.
    :return: The full command.
    """
    pm = PackageManager(package_manager)
    return get_runner(pm) + [
        "create-turbo@latest",
        "-e", template,
        "--package-manager", pm.value,
        "--skip-install",
        "--no-git",
        project_name,
    ]


def scaffold_project(project_name: str, package_manager: PackageManager,
                     template: str = DEFAULT_TEMPLATE, parent_dir: Optional[str] = None,
                     runner: Optional[ProcessRunner] = None) -> str:
    """
    Generates the project directory with create-turbo.

    :param project_name: Name of the directory to generate.
    :param package_manager: Package manager the workspace is set up for.
    :param template: Example repository passed to create-turbo.
    :param parent_dir: Directory the project is created in, the current one by default.
    :param runner: Process runner to use.
    :return: Path of the generated project.
    """
    parent_dir = os.path.abspath(parent_dir or os.getcwd())
    runner = runner or ProcessRunner()
    command = build_scaffold_command(project_name, package_manager, template)

    with task(f"Scaffolding project in {highlight(project_name)}...", "Failed to scaffold project") as t:
        runner.run(command, working_dir=parent_dir)
        t.done(f"Scaffolded project in {highlight(project_name)}")

    return os.path.join(parent_dir, project_name)
