"""
Models for user settings.
"""
from pydantic import BaseModel, ConfigDict, Field

from .project_options import PackageManager


class Settings(BaseModel):
    """
    Defaults that apply to every project created by this user.
    """
    model_config = ConfigDict(extra="forbid")

    template: str = "https://github.com/Badbird5907/turbo-kit"
    placeholder_scope: str = "@acme"
    default_package_manager: PackageManager = PackageManager.PNPM
    install_attempts: int = Field(default=3, ge=1)
