"""
Dependency installation and git initialization for a generated project.
"""
import logging
from typing import Optional

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from ..MODELS.project_options import PackageManager
from ..RUNNERS.process_runner import ProcessRunner
from ..UTILS.console import highlight, task
from ..UTILS.errors import CommandError
from ..UTILS.package_manager import get_install_command

logger = logging.getLogger(__name__)


def install_dependencies(project_dir: str, package_manager: PackageManager, attempts: int = 1,
                         retry_wait: float = 2.0, runner: Optional[ProcessRunner] = None):
    """
    Installs the workspace dependencies with the chosen package manager.

    :param project_dir: Root of the generated project.
    :param package_manager: Package manager to install with.
    :param attempts: How many times to run the install before giving up.
    :param retry_wait: Seconds to wait between attempts.
    :param runner: Process runner to use.
    """
    runner = runner or ProcessRunner()
    command = get_install_command(package_manager)

    def log_retry(retry_state):
        logger.warning("%s failed (attempt %d of %d), retrying...",
                       " ".join(command), retry_state.attempt_number, attempts)

    with task(f"Installing dependencies with {highlight(command[0])}...",
              "Failed to install dependencies") as t:
        for attempt in Retrying(
            stop=stop_after_attempt(max(attempts, 1)),
            wait=wait_fixed(retry_wait),
            retry=retry_if_exception_type(CommandError),
            before_sleep=log_retry,
            reraise=True,
        ):
            with attempt:
                runner.run(command, working_dir=project_dir)
        t.done("Installed dependencies")


def initialize_git(project_dir: str, runner: Optional[ProcessRunner] = None):
    """
    Creates a git repository with everything committed.

    :param project_dir: Root of the generated project.
    :param runner: Process runner to use.
    """
    runner = runner or ProcessRunner()
    with task("Initializing git repository...", "Failed to initialize git repository") as t:
        runner.run(["git", "init"], working_dir=project_dir)
        runner.run(["git", "add", "."], working_dir=project_dir)
        runner.run(["git", "commit", "-m", "Initial commit"], working_dir=project_dir)
        t.done("Initialized git repository")
