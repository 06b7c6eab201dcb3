"""
Models for optional local development containers.
"""
from typing import List
from pydantic import BaseModel, ConfigDict


class ContainerDefinition(BaseModel):
    """
    An optional development container that can be kept in or removed from
    the generated docker-compose.yml.
    """
    model_config = ConfigDict(frozen=True)

    identifier: str
    label: str

    # Compose services and named volumes owned by this container
    services: List[str] = []
    volumes: List[str] = []

    # Other container identifiers this one cannot run without
    depends_on: List[str] = []


class ComposeEditResult(BaseModel):
    """
    Outcome of tailoring a compose file to a container selection.
    """
    resolved: List[str]
    added_dependencies: List[str] = []
    removed_containers: List[str] = []
    removed_directories: List[str] = []
    removed_docker_dir: bool = False
