"""
orghub members command - Organization membership CLI.

List, check, remove, publicize and conceal organization members.
"""

import asyncio
from typing import Dict, List, Optional

import typer
from pydantic import ValidationError as ConfigError
from rich.console import Console
from rich.table import Table

from ...client import OrgHub
from ...exceptions import OrgHubError

console = Console()


def _parse_params(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated key=value options."""
    params: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {pair!r}", param_hint="--param")
        params[key] = value
    return params


def members_list_command(
    org: str = typer.Argument(..., help="Organization login"),
    public: bool = typer.Option(False, "--public", "-p", help="List public members only"),
    param: Optional[List[str]] = typer.Option(
        None,
        "--param",
        help="Extra query parameter as key=value (repeatable)",
    ),
) -> None:
    """
    List organization members.

    Example:
        $ orghub members list acme-corp
        $ orghub members list acme-corp --public --param per_page=100
    """
    params = _parse_params(param)
    if public:
        params["public"] = "true"

    asyncio.run(_list_members(org, params, public))


async def _list_members(org: str, params: Dict[str, str], public: bool) -> None:
    """Internal async function to list members."""
    try:
        async with await OrgHub.create() as hub:
            response = await hub.members.list(org, params)

        title = f"Public members of {org}" if public else f"Members of {org}"
        table = Table(title=title)
        table.add_column("Login", style="cyan")
        table.add_column("ID", style="magenta")
        table.add_column("Site admin", style="yellow")

        for record in response:
            table.add_row(
                str(record.get("login", "")),
                str(record.get("id", "")),
                "yes" if record.get("site_admin") else "no",
            )

        console.print(table)
        console.print(f"\nTotal: [cyan]{len(response)}[/cyan] member(s)\n")

    except (OrgHubError, ConfigError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def members_check_command(
    org: str = typer.Argument(..., help="Organization login"),
    user: str = typer.Argument(..., help="User login"),
    public: bool = typer.Option(False, "--public", "-p", help="Check public membership only"),
) -> None:
    """
    Check whether a user is a member. Exits 1 when not.

    Example:
        $ orghub members check acme-corp alice
    """
    asyncio.run(_check_member(org, user, public))


async def _check_member(org: str, user: str, public: bool) -> None:
    """Internal async function to check membership."""
    kind = "public member" if public else "member"
    try:
        async with await OrgHub.create() as hub:
            is_member = await hub.members.member(org, user, {"public": public})
    except (OrgHubError, ConfigError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if is_member:
        console.print(f"[green]✓[/green] {user} is a {kind} of {org}")
        return

    console.print(f"[yellow]✗[/yellow] {user} is not a {kind} of {org}")
    raise typer.Exit(1)


def members_remove_command(
    org: str = typer.Argument(..., help="Organization login"),
    user: str = typer.Argument(..., help="User login"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """
    Remove a member from the organization and all its teams.

    Example:
        $ orghub members remove acme-corp mallory --force
    """
    if not force:
        typer.confirm(f"Remove {user} from {org}?", abort=True)

    asyncio.run(_change_membership("remove", org, user))


def members_publicize_command(
    org: str = typer.Argument(..., help="Organization login"),
    user: str = typer.Argument(..., help="User login"),
) -> None:
    """
    Publicize a user's membership.

    Example:
        $ orghub members publicize acme-corp alice
    """
    asyncio.run(_change_membership("publicize", org, user))


def members_conceal_command(
    org: str = typer.Argument(..., help="Organization login"),
    user: str = typer.Argument(..., help="User login"),
) -> None:
    """
    Conceal a user's membership.

    Example:
        $ orghub members conceal acme-corp alice
    """
    asyncio.run(_change_membership("conceal", org, user))


DONE_MESSAGES = {
    "remove": "Removed {user} from {org}",
    "publicize": "Membership of {user} in {org} is now public",
    "conceal": "Membership of {user} in {org} is now concealed",
}


async def _change_membership(action: str, org: str, user: str) -> None:
    """Internal async function for remove/publicize/conceal."""
    try:
        async with await OrgHub.create() as hub:
            await getattr(hub.members, action)(org, user)
    except (OrgHubError, ConfigError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {DONE_MESSAGES[action].format(org=org, user=user)}")
