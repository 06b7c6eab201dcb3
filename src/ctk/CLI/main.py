"""
Command Line Interface for CTK.
"""
import logging
import os
import shutil
import sys

import click
from pydantic import ValidationError
from rich.markup import escape

from .. import __version__
from ..MANAGERS.compose_editor import configure_docker_compose, delete_docker_compose
from ..MANAGERS.environment_manager import ENV_FILE, setup_env
from ..MANAGERS.install_manager import initialize_git, install_dependencies
from ..MANAGERS.package_manifest import remove_react_email
from ..MANAGERS.scaffold_manager import scaffold_project
from ..MANAGERS.scope_manager import replace_scope
from ..MODELS.project_options import PackageManager, ProjectOptions
from ..MODELS.settings import Settings
from ..PARSERS.settings_parser import SettingsParser
from ..REGISTRY.container_registry import default_registry
from ..UTILS.console import console
from ..UTILS.errors import SettingsError
from ..UTILS.logger import setup_logging
from .prompts import (
    SCOPE_PREFIXES,
    cancel,
    confirm_scope,
    parse_container_selection,
    prompt_containers,
    prompt_package_manager,
    prompt_project_name,
    prompt_scope,
    validate_project_name,
    validate_scope,
    validation_message,
)

logger = logging.getLogger(__name__)


@click.command()
@click.argument('project_name', required=False)
@click.option('--package-manager', '-p', type=click.Choice([pm.value for pm in PackageManager]),
              help='Package manager for the workspace')
@click.option('--scope', '-s', help='Package scope replacing @acme, e.g. @my-org')
@click.option('--containers', '-c', help="Dev containers to keep: comma-separated names, 'all' or 'none'")
@click.option('--no-docker', is_flag=True, help='Remove the Docker Compose setup')
@click.option('--no-react-email', is_flag=True, help='Remove the react-email package')
@click.option('--skip-install', is_flag=True, help='Do not install dependencies')
@click.option('--git/--no-git', default=None, help='Initialize a git repository')
@click.option('--yes', '-y', is_flag=True, help='Accept defaults and overwrite an existing directory')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Settings file path')
@click.option('--verbose', '-v', is_flag=True, help='Show debug output')
@click.version_option(__version__, prog_name='create-turbo-kit')
def cli(project_name, package_manager, scope, containers, no_docker, no_react_email,
        skip_install, git, yes, config_path, verbose):
    """
    Create Turbo Kit - initialize a custom turborepo template.

    Generates PROJECT_NAME from the turbo-kit template, then applies your
    package scope, environment file and dev container selection.
    """
    setup_logging(verbose)
    registry = default_registry()

    try:
        settings = SettingsParser().load(config_path)
    except SettingsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    console.print()
    console.print("[black on cyan] Create Turbo Kit [/black on cyan]")

    if project_name:
        try:
            project_name = validate_project_name(project_name)
        except click.BadParameter as e:
            raise click.BadParameter(e.message, param_hint="'PROJECT_NAME'")
    if scope is not None:
        scope = validate_scope(scope)
    if containers is not None:
        try:
            selected = parse_container_selection(containers, registry)
        except click.BadParameter as e:
            raise click.BadParameter(e.message, param_hint="'--containers'")

    overwrite = False
    try:
        if not project_name:
            project_name = prompt_project_name()

        project_dir = os.path.abspath(project_name)
        if os.path.lexists(project_dir):
            if not yes and not click.confirm(
                f"Directory {project_name} already exists. Do you want to overwrite it?",
                default=False,
            ):
                cancel()
            overwrite = True

        if not package_manager:
            package_manager = (settings.default_package_manager if yes
                               else prompt_package_manager(settings.default_package_manager))

        if not scope:
            scope = prompt_scope(confirm=not yes)
        elif not scope.startswith(SCOPE_PREFIXES) and not yes:
            if not confirm_scope(scope):
                scope = prompt_scope()

        if no_docker:
            dev_containers = False
        elif containers is not None or yes:
            dev_containers = True
        else:
            dev_containers = click.confirm("Set up local dev containers?", default=True)

        if not dev_containers:
            selected = []
        elif containers is None:
            selected = registry.identifiers() if yes else prompt_containers(registry)

        if no_react_email:
            react_email = False
        else:
            react_email = yes or click.confirm("Include react-email (email templates)?", default=True)

        if git is None:
            git = yes or click.confirm("Initialize a git repository?", default=True)
    except (click.Abort, KeyboardInterrupt):
        cancel()

    try:
        options = ProjectOptions(
            project_name=project_name,
            package_manager=package_manager,
            scope=scope,
            dev_containers=dev_containers,
            containers=selected,
            react_email=react_email,
            install=not skip_install,
            git=git,
        )
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {escape(validation_message(e))}")
        sys.exit(1)

    logger.debug("Creating project with %s", options)

    try:
        if overwrite:
            remove_existing(project_dir)
        create_project(options, project_dir, settings)
    except KeyboardInterrupt:
        cancel()
    except Exception as e:
        logger.debug("Project creation failed", exc_info=True)
        console.print(f"[red]An error occurred:[/red] {escape(str(e))}")
        sys.exit(1)


def remove_existing(path: str):
    """Deletes whatever is in the way of the new project."""
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)
    logger.debug("Removed existing %s", path)


def create_project(options: ProjectOptions, project_dir: str, settings: Settings):
    """
    Runs every step of project creation in order.

    :param options: The user's choices.
    :param project_dir: Where the project is generated.
    :param settings: User settings.
    """
    scaffold_project(
        options.project_name,
        options.package_manager,
        template=settings.template,
        parent_dir=os.path.dirname(project_dir),
    )

    # Runs before the scope rewrite, while manifests still use the placeholder
    if not options.react_email:
        remove_react_email(project_dir, settings.placeholder_scope)

    replace_scope(project_dir, options.scope, settings.placeholder_scope)
    missing = setup_env(project_dir)

    if options.dev_containers:
        configure_docker_compose(project_dir, options.containers)
    else:
        delete_docker_compose(project_dir)

    if options.install:
        install_dependencies(project_dir, options.package_manager, attempts=settings.install_attempts)

    if options.git:
        initialize_git(project_dir)

    console.print("[green]Project initialized successfully![/green]")
    if missing:
        console.print(f"Fill in these variables in {ENV_FILE}: [yellow]{escape(', '.join(missing))}[/yellow]")
    console.print()
    console.print("To get started:")
    console.print(f"[cyan]  cd {escape(options.project_name)}[/cyan]")
    if not options.install:
        console.print(f"[cyan]  {options.package_manager.value} install[/cyan]")
    console.print(f"[cyan]  {options.package_manager.value} run dev[/cyan]")
    console.print()
    console.print("[bright_green]Happy Hacking![/bright_green]")


def main():
    """
    Main entry point for the CLI.
    """
    cli()


if __name__ == '__main__':
    main()
