"""
Models for the choices made while creating a project.
"""
import re
from typing import List
from enum import Enum
from pydantic import BaseModel, field_validator

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


class PackageManager(str, Enum):
    """
    Package managers the generated workspace can be set up with.
    """
    PNPM = "pnpm"
    NPM = "npm"
    YARN = "yarn"
    BUN = "bun"


class ProjectOptions(BaseModel):
    """
    Everything needed to scaffold and tailor a new project.
    """
    project_name: str
    package_manager: PackageManager = PackageManager.PNPM
    scope: str

    # Docker
    dev_containers: bool = True
    containers: List[str] = []

    # Optional steps
    react_email: bool = True
    install: bool = True
    git: bool = False

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please enter a name.")
        if not PROJECT_NAME_PATTERN.match(value):
            raise ValueError(
                "Project name can only contain letters, numbers, dashes and underscores."
            )
        return value

    @field_validator("scope")
    @classmethod
    def _check_scope(cls, value: str) -> str:
        if not value:
            raise ValueError("Please enter a scope.")
        return value
