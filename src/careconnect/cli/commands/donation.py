"""Medicine donation commands."""

import click
from careconnect.cli.account_resolution import resolve_account_or_exit
from careconnect.cli.error_handling import handle_domain_error
from careconnect.domain.account import AccountService
from careconnect.domain.donation import DonationService
from careconnect.domain.entities import DonationRecord
from careconnect.domain.errors import DomainError
from careconnect.utils.date_parser import parse_date


@click.group()
def donation_group():
    """Record and list medicine donations."""
    pass


@donation_group.command("add")
@click.argument("medicine", metavar="MEDICINE")
@click.option("--expiry", required=True, help="Expiry date (e.g. 2026-01-31)")
@click.option("--quantity", required=True, type=int, help="Number of units")
@click.option("--email", "donor_email", required=True, help="Donor email")
@click.pass_context
def add_donation(ctx, medicine: str, expiry: str, quantity: int, donor_email: str):
    """Record a medicine donation.

    The donation is linked to the account registered with --email, if any.
    Donations from unregistered emails are recorded anonymously.

    Examples:
        careconnect donation add "Aspirin" --expiry 2026-01-31 --quantity 10 --email a@x.com
    """
    db = ctx.obj["db"]
    service = DonationService(db)

    try:
        expiry_date = parse_date(expiry)
    except ValueError as e:
        click.echo(f"Error: Invalid expiry date: {e}", err=True)
        ctx.exit(1)

    try:
        donation_id = service.donate(
            medicine_name=medicine,
            expiry_date=expiry_date,
            quantity=quantity,
            donor_email=donor_email,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    donation = service.get_donation(donation_id)
    click.echo(f"Recorded donation of {quantity} x '{medicine}' (ID: {donation_id})")
    if donation is not None and donation.donor_name:
        click.echo(f"Donor: {donation.donor_name}")
    else:
        click.echo("No account found for that email; recorded as anonymous")


def _format_row(record: DonationRecord, show_donor: bool) -> str:
    line = (
        f"ID: {record.id:4d} | {record.name:20s} | Qty: {record.quantity:5d} | "
        f"Expires: {record.expiry_date.isoformat()} | "
        f"Donated: {record.donation_date.strftime('%Y-%m-%d %H:%M')}"
    )
    if show_donor:
        donor = record.donor_name if record.donor_name else "(anonymous)"
        line += f" | {donor} <{record.donor_email}>"
    return line


@donation_group.command("list")
@click.pass_context
def list_donations(ctx):
    """List all donated medicines, newest first."""
    db = ctx.obj["db"]
    service = DonationService(db)

    donations = service.list_available()
    if not donations:
        click.echo("No donations found.")
        return

    click.echo("\nAvailable medicines:")
    click.echo("-" * 100)
    for record in donations:
        click.echo(_format_row(record, show_donor=True))


@donation_group.command("history")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def donation_history(ctx, account: str):
    """Show the donations linked to an account.

    ACCOUNT can be an account email or ID.
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)
    service = DonationService(db)

    donations = service.list_donations_by_account(account_id)
    if not donations:
        click.echo("No donations found.")
        return

    click.echo(f"\nDonations by account {account_id}:")
    click.echo("-" * 80)
    for record in donations:
        click.echo(_format_row(record, show_donor=False))


def register_commands(cli):
    """Register donation commands with main CLI."""
    cli.add_command(donation_group, name="donation")
