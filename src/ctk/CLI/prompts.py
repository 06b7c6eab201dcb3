"""
Interactive prompts for project creation.
"""
import sys
from typing import List

import click
from pydantic import ValidationError
from rich.markup import escape

from ..MODELS.project_options import PROJECT_NAME_PATTERN, PackageManager
from ..REGISTRY.container_registry import ContainerRegistry
from ..UTILS.console import console

# Scopes starting with one of these are used as-is without confirmation
SCOPE_PREFIXES = ("@", "~", "$", "#", "!")


def cancel():
    """Stops the program without doing anything further."""
    console.print("[red]Operation cancelled.[/red]")
    sys.exit(0)


def validate_project_name(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise click.BadParameter("Please enter a name.")
    if not PROJECT_NAME_PATTERN.match(value):
        raise click.BadParameter(
            "Project name can only contain letters, numbers, dashes and underscores."
        )
    return value


def validate_scope(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise click.BadParameter("Please enter a scope.")
    return value


def parse_container_selection(value: str, registry: ContainerRegistry) -> List[str]:
    """
    Parses a container selection such as ``postgres,redis``, ``all`` or ``none``.

    Entries may be identifiers or 1-based positions in the registry listing.

    :param value: The raw selection.
    :param registry: Known containers.
    :return: Selected identifiers, in registry order.
    :raises click.BadParameter: If an entry is not a known container.
    """
    value = (value or "").strip()
    identifiers = registry.identifiers()
    if value.lower() == "all":
        return identifiers
    if value.lower() in ("", "none"):
        return []

    selected = set()
    for entry in (part.strip() for part in value.split(",")):
        if not entry:
            continue
        if entry.isdigit() and 1 <= int(entry) <= len(identifiers):
            selected.add(identifiers[int(entry) - 1])
        elif entry in registry:
            selected.add(entry)
        else:
            raise click.BadParameter(
                f"Unknown container '{entry}'. Choose from: {', '.join(identifiers)}"
            )
    return [name for name in identifiers if name in selected]


def prompt_project_name() -> str:
    return click.prompt("What is your project named?", default="my-turbo-app",
                        value_proc=validate_project_name)


def prompt_package_manager(default: PackageManager) -> PackageManager:
    choice = click.prompt(
        "Which package manager do you want to use?",
        type=click.Choice([pm.value for pm in PackageManager]),
        default=PackageManager(default).value,
    )
    return PackageManager(choice)


def prompt_scope(confirm: bool = True) -> str:
    """
    Asks for the package scope.

    A scope without a usual prefix is confirmed by showing an import
    statement that uses it; declining asks again.
    """
    while True:
        scope = click.prompt("What is your package scope? (e.g. @my-org)", value_proc=validate_scope)
        if not confirm or scope.startswith(SCOPE_PREFIXES):
            return scope
        if confirm_scope(scope):
            return scope


def confirm_scope(scope: str) -> bool:
    """Shows an import statement using ``scope`` and asks whether it is right."""
    import_statement = (
        f'[magenta]import[/magenta] [yellow]{{[/yellow] [cyan]example[/cyan] [yellow]}}[/yellow] '
        f'[magenta]from[/magenta] [cyan]"{escape(scope)}/example"[/cyan]'
    )
    console.print(f"Your import statements will look like this: {import_statement}")
    return click.confirm(f"Is {scope} the correct scope?", default=True)


def prompt_containers(registry: ContainerRegistry) -> List[str]:
    console.print("Which containers do you want to include?")
    for position, (identifier, label) in enumerate(registry.list_all(), start=1):
        console.print(f"  {position}. [cyan]{identifier:10}[/cyan] {escape(label)}")
    return click.prompt(
        "Containers (comma-separated names or numbers, 'all' or 'none')",
        default="all",
        value_proc=lambda value: parse_container_selection(value, registry),
    )


def validation_message(error: ValidationError) -> str:
    """First human-readable message of a pydantic validation error."""
    details = error.errors()
    if not details:
        return str(error)
    message = details[0].get("msg", str(error))
    return message.replace("Value error, ", "")
