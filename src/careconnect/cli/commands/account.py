"""Account management commands."""

import click
from careconnect.cli.account_resolution import resolve_account_or_exit
from careconnect.cli.error_handling import handle_domain_error
from careconnect.domain.account import AccountService
from careconnect.domain.errors import DomainError, NotFoundError, account_not_found
from careconnect.utils.date_parser import parse_date


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("register")
@click.argument("fullname", metavar="FULLNAME")
@click.argument("email", metavar="EMAIL")
@click.option("--dob", required=True, help="Date of birth (e.g. 1990-05-17)")
@click.option("--phone", required=True, help="Phone number")
@click.option("--state", required=True, help="State or region")
@click.option("--password", prompt=True, hide_input=True, help="Password")
@click.option(
    "--confirm-password",
    prompt="Confirm password",
    hide_input=True,
    help="Password again",
)
@click.pass_context
def register_account(
    ctx,
    fullname: str,
    email: str,
    dob: str,
    phone: str,
    state: str,
    password: str,
    confirm_password: str,
):
    """Register a new account.

    Examples:
        careconnect account register "Alice Doe" alice@example.com --dob 1990-05-17 \\
            --phone 555-0100 --state Lagos
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        date_of_birth = parse_date(dob)
    except ValueError as e:
        click.echo(f"Error: Invalid date of birth: {e}", err=True)
        ctx.exit(1)

    try:
        account_id = service.register(
            fullname=fullname,
            email=email,
            password=password,
            confirm_password=confirm_password,
            dob=date_of_birth,
            phone=phone,
            state=state,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Registered account '{email}' (ID: {account_id})")


@account_group.command("login")
@click.argument("email", metavar="EMAIL")
@click.option("--password", prompt=True, hide_input=True, help="Password")
@click.pass_context
def login(ctx, email: str, password: str):
    """Check an email and password."""
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account = service.authenticate(email=email, password=password)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Login successful: {account.fullname} <{account.email}> (ID: {account.id})")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account email or ID.

    Donations made by the account are kept. They stay listed with the
    email they were made with, but are no longer linked to any account.

    Examples:
        careconnect account delete alice@example.com
        careconnect account delete 1 --yes
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, service, account)
    account_obj = service.get_account(account_id)
    if account_obj is None:
        # Removed by someone else since it was resolved
        handle_domain_error(ctx, NotFoundError(account_not_found(account_id)))
        return

    # Confirm deletion
    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.email}' (ID: {account_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        anonymized = service.delete_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted account '{account_obj.email}'")
    if anonymized:
        click.echo(f"{anonymized} donation{'s' if anonymized != 1 else ''} kept as anonymous")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
