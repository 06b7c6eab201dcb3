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
Registry of the optional development containers shipped with the template.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..MODELS.container_definition import ContainerDefinition


DOCKER_CONTAINERS: Tuple[ContainerDefinition, ...] = (
    ContainerDefinition(
        identifier="postgres",
        label="PostgreSQL 16 (Database)",
        services=["postgres"],
        volumes=["postgres_data"],
    ),
    ContainerDefinition(
        identifier="pgadmin",
        label="pgAdmin 4.9 (Database management) [Depends on PostgreSQL]",
        services=["pgadmin"],
        depends_on=["postgres"],
    ),
    ContainerDefinition(
        identifier="redis",
        label="Redis (Caching)",
        services=["redis"],
    ),
    ContainerDefinition(
        identifier="mailpit",
        label="Mailpit (Email testing)",
        services=["mailpit"],
    ),
    ContainerDefinition(
        identifier="minio",
        label="MinIO (S3-compatible storage)",
        services=["minio", "minio-create-bucket"],
        volumes=["minio_data"],
    ),
)


class ContainerRegistry:
    """
    Read-only lookup of container definitions, keyed by identifier.

    Registration order is preserved so prompts list containers the same way
    every time.
    """

    def __init__(self, definitions: Iterable[ContainerDefinition] = DOCKER_CONTAINERS):
        """
        Args:
            definitions: Container definitions; later duplicates replace earlier ones.
        """
        self._containers: Dict[str, ContainerDefinition] = {}
        for definition in definitions:
            self._containers[definition.identifier] = definition

    def list_all(self) -> List[Tuple[str, str]]:
        """Identifier and label of every container, in registry order."""
        return [(c.identifier, c.label) for c in self._containers.values()]

    def get(self, identifier: str) -> Optional[ContainerDefinition]:
        """Definition for ``identifier``, or None when it is not registered."""
        return self._containers.get(identifier)

    def identifiers(self) -> List[str]:
        return list(self._containers)

    def dependency_graph(self) -> Dict[str, List[str]]:
        """Identifier to the identifiers it depends on."""
        return {name: list(c.depends_on) for name, c in self._containers.items()}

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._containers

    def __len__(self) -> int:
        return len(self._containers)


_DEFAULT_REGISTRY = ContainerRegistry()


def default_registry() -> ContainerRegistry:
    """The registry of containers shipped with the turbo-kit template."""
    return _DEFAULT_REGISTRY
