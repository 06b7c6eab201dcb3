"""
Command lines for the supported package managers.
"""
from typing import List, Union

from ..MODELS.project_options import PackageManager

RUNNERS = {
    PackageManager.NPM: ["npx"],
    PackageManager.PNPM: ["pnpm", "dlx"],
    PackageManager.YARN: ["yarn", "dlx"],
    PackageManager.BUN: ["bunx"],
}


def get_runner(pm: Union[PackageManager, str]) -> List[str]:
    """
    Command used to run a package binary without installing it.

    :param pm: The package manager.
    :return: The runner command, ``npx`` for anything unknown.
    """
    try:
        return list(RUNNERS[PackageManager(pm)])
    except ValueError:
        return ["npx"]


def get_install_command(pm: Union[PackageManager, str]) -> List[str]:
    """
    Command that installs a workspace's dependencies.

    :param pm: The package manager.
    :return: ``<pm> install``, ``npm install`` for anything unknown.
    """
    try:
        return [PackageManager(pm).value, "install"]
    except ValueError:
        return ["npm", "install"]
