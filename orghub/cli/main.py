"""
OrgHub CLI - Command-line interface for organization memberships.

Usage:
    orghub members list ORG         List organization members
    orghub members check ORG USER   Check membership
    orghub members remove ORG USER  Remove a member
    orghub members publicize ORG USER
    orghub members conceal ORG USER
"""

import typer

from ..logging import configure_logging
from .commands import members

app = typer.Typer(
    name="orghub",
    help="Organization membership client",
    add_completion=False,
)

# Create members subcommand group
members_app = typer.Typer(help="Manage organization members")
members_app.command(name="list")(members.members_list_command)
members_app.command(name="check")(members.members_check_command)
members_app.command(name="remove")(members.members_remove_command)
members_app.command(name="publicize")(members.members_publicize_command)
members_app.command(name="conceal")(members.members_conceal_command)
app.add_typer(members_app, name="members")


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Log every API request"),
) -> None:
    """
    OrgHub - organization membership client.

    Reads ORGHUB_TOKEN and ORGHUB_API_URL from the environment or .env.
    """
    configure_logging(debug=debug)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
