"""
GetUs.Fit API - Administration CLI.

Operator commands that run against the configured database directly. The
first admin account can only be created here: register through the API,
then run ``getusfit set-role <username> admin``.
"""

import click

from app.database import get_session_factory, init_db
from app.models.account import Role
from app.stores.accounts import AccountStore
from app.utils.errors import ValidationError


@click.group()
@click.version_option(version="1.0.0", prog_name="getusfit")
def main():
    """getusfit: GetUs.Fit API administration.

    Example usage:

        # Create the database tables
        getusfit init-db

        # Promote an account to admin
        getusfit set-role alice admin

        # Run the API
        getusfit serve --port 8000
    """
    pass


@main.command(name="init-db")
def init_db_command():
    """Create all database tables that do not exist yet."""
    init_db()
    click.echo(click.style("Database initialized.", fg="green"))


@main.command(name="set-role")
@click.argument("username")
@click.argument("role", type=click.Choice(Role.values()))
def set_role(username: str, role: str):
    """Set the role of an account (user, trainer or admin)."""
    init_db()
    db = get_session_factory()()
    try:
        store = AccountStore(db)
        account = store.find_by_username(username)
        if account is None:
            raise click.ClickException(f"No account named '{username}'.")
        previous = account.role
        try:
            store.set_role(account, role)
        except ValidationError as e:
            raise click.ClickException(e.message)
        click.echo(click.style(f"{account.username}: {previous} -> {role}", fg="green"))
    finally:
        db.close()


@main.command(name="list-users")
def list_users():
    """List every account with its role."""
    init_db()
    db = get_session_factory()()
    try:
        accounts = AccountStore(db).list_all()
        if not accounts:
            click.echo("No accounts found.")
            return
        click.echo(f"{'ID':>5}  {'Username':<30}  Role")
        for account in accounts:
            click.echo(f"{account.id:>5}  {account.username:<30}  {account.role}")
        click.echo()
        click.echo(f"Total: {len(accounts)} account(s)")
    finally:
        db.close()


@main.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str, port: int, reload: bool):
    """Start the API server."""
    import uvicorn

    click.echo(click.style(f"Starting GetUs.Fit API on http://{host}:{port}", fg="green"))
    uvicorn.run("main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
