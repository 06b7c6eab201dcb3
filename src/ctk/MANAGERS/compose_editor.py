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
Tailoring of the generated docker-compose.yml to the selected containers.
"""
import logging
import os
import shutil
from typing import Iterable, List, Optional

from ..MODELS.container_definition import ComposeEditResult
from ..PARSERS.compose_parser import ComposeParser
from ..REGISTRY.container_registry import ContainerRegistry, default_registry
from ..RUNNERS.dependency_resolver import DependencyResolver
from ..UTILS.console import highlight, task
from ..UTILS.errors import ComposeFileNotFound

logger = logging.getLogger(__name__)

COMPOSE_FILE = "docker-compose.yml"
DOCKER_DIR = "docker"


class ComposeEditor:
    """
    Keeps the regions of selected containers in a project's compose file and
    removes everything belonging to the others.
    """
    def __init__(self, project_dir: str, registry: Optional[ContainerRegistry] = None):
        """
        Initializes the editor.

        :param project_dir: Root of the generated project.
        :param registry: Known containers; defaults to the shipped registry.
        """
        self.project_dir = os.path.abspath(project_dir)
        self.registry = registry or default_registry()
        self.resolver = DependencyResolver(self.registry.dependency_graph())
        self.parser = ComposeParser()

    @property
    def compose_path(self) -> str:
        return os.path.join(self.project_dir, COMPOSE_FILE)

    @property
    def docker_dir(self) -> str:
        return os.path.join(self.project_dir, DOCKER_DIR)

    def edit(self, content: str, resolved: Iterable[str], all_identifiers: Iterable[str]) -> str:
        """
        Edits compose text for a resolved selection.

        Regions of identifiers in ``all_identifiers`` but not in ``resolved``
        are removed together with their markers, then the markers of every
        remaining region are stripped. Regions absent from the text are
        ignored.

        :param content: The compose file text.
        :param resolved: Identifiers to keep, dependencies included.
        :param all_identifiers: Every identifier that may be removed.
        :return: The edited text.
        """
        to_remove = set(all_identifiers) - set(resolved)
        segments = self.parser.parse(content)
        return self.parser.render(segments, remove=to_remove)

    def apply(self, selected: Iterable[str]) -> ComposeEditResult:
        """
        Rewrites the compose file for ``selected`` and deletes the support
        directories of the containers that were not kept.

        :param selected: Container identifiers chosen by the user.
        :return: What was resolved and removed.
        :raises ComposeFileNotFound: If the project has no compose file.
        """
        if not os.path.isfile(self.compose_path):
            raise ComposeFileNotFound(self.compose_path)

        selected = set(selected)
        resolved = self.resolver.resolve(selected)
        all_identifiers = self.registry.identifiers()
        to_remove = [name for name in all_identifiers if name not in resolved]
        logger.debug("Resolved containers %s, removing %s", sorted(resolved), to_remove)

        with open(self.compose_path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()

        content = self.edit(content, resolved, all_identifiers)

        with open(self.compose_path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)

        removed_directories = []
        for name in to_remove:
            path = os.path.join(self.docker_dir, name)
            if os.path.isdir(path):
                shutil.rmtree(path)
                logger.debug("Removed support directory %s", path)
                removed_directories.append(path)

        return ComposeEditResult(
            resolved=sorted(resolved),
            added_dependencies=sorted(resolved - selected),
            removed_containers=to_remove,
            removed_directories=removed_directories,
            removed_docker_dir=self._prune_docker_dir(),
        )

    def remove_all(self) -> List[str]:
        """
        Removes the compose file and the whole docker directory.

        :return: Paths that were removed.
        """
        removed = []
        if os.path.exists(self.compose_path):
            os.remove(self.compose_path)
            removed.append(self.compose_path)
        if os.path.exists(self.docker_dir):
            shutil.rmtree(self.docker_dir)
            removed.append(self.docker_dir)
        logger.debug("Removed Docker Compose setup: %s", removed)
        return removed

    def _prune_docker_dir(self) -> bool:
        """
        Deletes the docker directory if nothing is left in it.
        """
        if os.path.isdir(self.docker_dir) and not os.listdir(self.docker_dir):
            os.rmdir(self.docker_dir)
            logger.debug("Removed empty directory %s", self.docker_dir)
            return True
        return False


def configure_docker_compose(project_dir: str, selected: Iterable[str],
                             registry: Optional[ContainerRegistry] = None) -> Optional[ComposeEditResult]:
    """
    Interactive step: tailors the compose setup to the selected containers.

    :param project_dir: Root of the generated project.
    :param selected: Container identifiers chosen by the user.
    :param registry: Known containers; defaults to the shipped registry.
    :return: The edit result, or None if the project has no compose file.
    """
    editor = ComposeEditor(project_dir, registry)

    with task("Configuring Docker Compose...", "Failed to configure Docker Compose") as t:
        try:
            result = editor.apply(selected)
        except ComposeFileNotFound:
            t.skip("Docker Compose file not found")
            return None

        if result.added_dependencies:
            t.message(f"Auto-including dependencies: {highlight(', '.join(result.added_dependencies))}")
        for path in result.removed_directories:
            t.message(f"Removed {highlight(os.path.relpath(path, editor.project_dir))}")
        if result.removed_docker_dir:
            t.message(f"Removed {highlight(DOCKER_DIR)} [dim](because it was empty)[/dim]")

        t.done(f"Configured Docker Compose with {highlight(len(result.resolved))} container(s)")
    return result


def delete_docker_compose(project_dir: str) -> List[str]:
    """
    Interactive step: removes the Docker Compose setup from the project.
    """
    editor = ComposeEditor(project_dir)
    with task("Removing Docker Compose setup...", "Failed to remove Docker Compose setup") as t:
        removed = editor.remove_all()
        for path in removed:
            t.message(f"Removed {highlight(os.path.relpath(path, editor.project_dir))}")
        t.done("Removed Docker Compose setup")
    return removed
