# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Execution of external commands (generators, package managers, git).
"""
import logging
import os
import subprocess
from typing import Dict, List, Optional

from ..UTILS.errors import CommandError

logger = logging.getLogger(__name__)


class ProcessRunner:
    """
    Runs external commands to completion and captures their output.
    """
    def __init__(self, env: Optional[Dict[str, str]] = None):
        """
        Initializes the process runner.

        Args:
            env (Optional[Dict[str, str]]): Extra environment variables for every command.
        """
        self.env = env or {}

    def run(self, command: List[str], working_dir: Optional[str] = None) -> subprocess.CompletedProcess:
        """
        Runs a command and waits for it to finish.

        Args:
            command (List[str]): Command and arguments to execute.
            working_dir (Optional[str]): Directory to run the command in.

        Returns:
            subprocess.CompletedProcess: The finished process.

        Raises:
            CommandError: If the command cannot be started or exits non-zero.
        """
        env = os.environ.copy()
        env.update(self.env)

        logger.debug("Running %s in %s", " ".join(command), working_dir or os.getcwd())

        try:
            result = subprocess.run(
                command,
                env=env,
                cwd=working_dir,
                capture_output=True,
                text=True,
                # Avoid shell=True for security reasons (CWE-78)
                shell=False
            )
        except OSError as e:
            raise CommandError(command, stderr=str(e)) from e

        if result.returncode != 0:
            raise CommandError(command, result.returncode, result.stderr)

        return result
