from __future__ import annotations

import questionary
from rich.console import Console
from rich.table import Table

from condofee.constants import FEE_TYPE_LABELS
from condofee.errors import InvalidInputError, NotFoundError
from condofee.models import format_vnd, parse_amount
from condofee.models.fee import Fee
from condofee.services.fee_service import FeeService

console = Console()

_TYPE_CHOICES = {label: fee_type for fee_type, label in FEE_TYPE_LABELS.items()}


def _ask_period() -> tuple[int, int] | None:
    raw = questionary.text("Billing month (YYYY-MM):").ask()
    if not raw:
        return None
    try:
        year_str, month_str = raw.strip().split("-")
        return int(year_str), int(month_str)
    except ValueError:
        console.print("[red]Invalid month, expected YYYY-MM.[/red]")
        return None


def create_fee_menu(fee_service: FeeService) -> None:
    console.print()
    console.print("[bold]New Fee[/bold]", style="cyan")

    description = questionary.text("Description:").ask()
    if not description:
        console.print("[yellow]Cancelled.[/yellow]")
        return

    type_label = questionary.select("Type:", choices=list(_TYPE_CHOICES)).ask()
    if type_label is None:
        return
    fee_type = _TYPE_CHOICES[type_label]

    while True:
        amount_str = questionary.text("Unit amount (e.g. 5000):").ask()
        if amount_str is None:
            return
        amount = parse_amount(amount_str)
        if amount is not None:
            break
        console.print("[red]Invalid amount. Try again.[/red]")

    period = _ask_period()
    if period is None:
        return
    compulsory = questionary.confirm("Compulsory for every resident?", default=True).ask()

    try:
        fee, generated = fee_service.create_fee(
            fee_type, amount, period[0], period[1], description=description, compulsory=bool(compulsory)
        )
    except InvalidInputError as e:
        console.print(f"[red]Could not create fee: {e}[/red]")
        return

    console.print()
    console.print(f"[green bold]Fee '{fee.description}' created for {fee.period}.[/green bold]")
    if fee.compulsory:
        console.print(f"  {generated} unpaid payment(s) generated.")


def _fees_table(fees: list[Fee]) -> Table:
    table = Table(title="Fees")
    table.add_column("#", style="dim")
    table.add_column("Description", style="bold")
    table.add_column("Type")
    table.add_column("Amount", justify="right")
    table.add_column("Month")
    table.add_column("Compulsory", justify="center")
    for fee in fees:
        table.add_row(
            str(fee.id),
            fee.description,
            FEE_TYPE_LABELS[fee.fee_type],
            format_vnd(fee.amount),
            fee.period,
            "yes" if fee.compulsory else "no",
        )
    return table


def list_fees_menu(fee_service: FeeService) -> None:
    fees = fee_service.list_fees()
    if not fees:
        console.print("[yellow]No fees yet.[/yellow]")
        return

    console.print()
    console.print(_fees_table(fees))
    console.print()

    fee_choices = {f"{fee.id} - {fee.description} ({fee.period})": fee for fee in fees}
    choice = questionary.select("Select a fee:", choices=list(fee_choices) + ["Back"]).ask()
    if choice is None or choice == "Back":
        return

    _fee_detail_menu(fee_choices[choice], fee_service)


def _fee_detail_menu(fee: Fee, fee_service: FeeService) -> None:
    while True:
        choice = questionary.select(
            f"Fee: {fee.description}",
            choices=["View Payments", "Delete Fee", "Back"],
        ).ask()

        if choice is None or choice == "Back":
            break
        elif choice == "View Payments":
            _show_fee_payments(fee, fee_service)
        elif choice == "Delete Fee":
            confirm = questionary.confirm(
                f"Delete '{fee.description}' and all its payments?", default=False
            ).ask()
            if confirm:
                try:
                    fee_service.delete_fee(fee.id)
                except NotFoundError as e:
                    console.print(f"[red]{e}[/red]")
                    break
                console.print("[green]Fee deleted.[/green]")
                break


def _show_fee_payments(fee: Fee, fee_service: FeeService) -> None:
    rows = fee_service.list_payments(fee.id)
    if not rows:
        console.print("[yellow]No payments for this fee.[/yellow]")
        return

    table = Table(title=f"Payments - {fee.description} ({fee.period})")
    table.add_column("#", style="dim")
    table.add_column("Apartment")
    table.add_column("Resident")
    table.add_column("Qty", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Status")
    table.add_column("Paid on")
    for row in rows:
        table.add_row(
            str(row.payment.id),
            row.apartment_number,
            row.resident_name,
            str(row.payment.quantity),
            format_vnd(row.payment.amount_paid),
            row.payment.status,
            row.payment.date_paid.isoformat() if row.payment.date_paid else "-",
        )
    console.print(table)
