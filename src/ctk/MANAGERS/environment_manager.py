"""
Creation of the project's .env file from its example.
"""
import logging
import os
import shutil
from typing import List, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

ENV_EXAMPLE = ".env.example"
ENV_FILE = ".env"


class EnvironmentManager:
    """
    Sets up the environment file of a generated project.
    """
    def __init__(self, project_dir: str):
        """
        Initializes the environment manager.

        :param project_dir: Root of the generated project.
        """
        self.project_dir = project_dir

    @property
    def example_path(self) -> str:
        return os.path.join(self.project_dir, ENV_EXAMPLE)

    @property
    def env_path(self) -> str:
        return os.path.join(self.project_dir, ENV_FILE)

    def setup_env(self) -> Optional[List[str]]:
        """
        Copies .env.example to .env, replacing any existing .env.

        :return: Variables left without a value, or None if there is no example file.
        """
        if not os.path.exists(self.example_path):
            logger.debug("No %s in %s", ENV_EXAMPLE, self.project_dir)
            return None

        shutil.copyfile(self.example_path, self.env_path)
        return self.missing_values()

    def missing_values(self) -> List[str]:
        """
        Names of the variables in .env that have an empty value.
        """
        values = dotenv_values(self.env_path)
        return [key for key, value in values.items() if not value]


def setup_env(project_dir: str) -> Optional[List[str]]:
    """
    Copies .env.example to .env in ``project_dir``.

    :return: Variables left without a value, or None if there is no example file.
    """
    return EnvironmentManager(project_dir).setup_env()
