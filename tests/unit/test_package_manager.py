import pytest
from ctk.MODELS.project_options import PackageManager
from ctk.UTILS.package_manager import get_install_command, get_runner


@pytest.mark.parametrize("pm, runner", [
    (PackageManager.NPM, ["npx"]),
    (PackageManager.PNPM, ["pnpm", "dlx"]),
    (PackageManager.YARN, ["yarn", "dlx"]),
    (PackageManager.BUN, ["bunx"]),
    ("pnpm", ["pnpm", "dlx"]),
    ("pip", ["npx"]),
])
def test_get_runner(pm, runner):
    assert get_runner(pm) == runner


def test_get_runner_returns_copy():
    get_runner(PackageManager.PNPM).append("oops")
    assert get_runner(PackageManager.PNPM) == ["pnpm", "dlx"]


def test_get_install_command():
    assert get_install_command(PackageManager.YARN) == ["yarn", "install"]
    assert get_install_command("bun") == ["bun", "install"]
    assert get_install_command("cargo") == ["npm", "install"]
