from __future__ import annotations

import questionary
from rich.console import Console
from rich.table import Table

from condofee.errors import InvalidInputError, NotFoundError
from condofee.models import format_vnd
from condofee.models.payment import PaymentView
from condofee.services.fee_service import FeeService
from condofee.services.payment_service import PaymentService
from condofee.services.resident_service import ResidentService

console = Console()


def payments_table(payments: list[PaymentView], title: str = "Payments") -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim")
    table.add_column("Fee", justify="right")
    table.add_column("Resident", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Status")
    table.add_column("Paid on")
    for p in payments:
        table.add_row(
            str(p.id),
            str(p.fee_id),
            str(p.resident_id),
            str(p.quantity),
            format_vnd(p.amount_paid),
            p.status,
            p.date_paid.isoformat() if p.date_paid else "-",
        )
    return table


def payments_menu(
    payment_service: PaymentService, fee_service: FeeService, resident_service: ResidentService
) -> None:
    while True:
        choice = questionary.select(
            "Payments",
            choices=["Search Payments", "Record Payment", "Update Payment", "Delete Payment", "Back"],
        ).ask()

        if choice is None or choice == "Back":
            break
        try:
            if choice == "Search Payments":
                _search_payments(payment_service)
            elif choice == "Record Payment":
                _record_payment(payment_service, fee_service, resident_service)
            elif choice == "Update Payment":
                _update_payment(payment_service)
            elif choice == "Delete Payment":
                _delete_payment(payment_service)
        except (NotFoundError, InvalidInputError) as e:
            console.print(f"[red]{e}[/red]")


def _ask_int(prompt: str, default: str = "") -> int | None:
    """Prompt until the entry is a whole number. Blank or cancelled returns None.

    Negative numbers are returned as typed so the service can reject them.
    """
    while True:
        raw = questionary.text(prompt, default=default).ask()
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw.strip())
        except ValueError:
            console.print("[red]Enter a whole number.[/red]")


def _search_payments(payment_service: PaymentService) -> None:
    query = questionary.text("Search (status, fee, type or resident):").ask() or ""
    payments = payment_service.search_payments(query)
    if not payments:
        console.print("[yellow]No matching payments.[/yellow]")
        return
    console.print(payments_table(payments))


def _record_payment(
    payment_service: PaymentService, fee_service: FeeService, resident_service: ResidentService
) -> None:
    fees = fee_service.list_fees()
    residents = resident_service.list_residents()
    if not fees or not residents:
        console.print("[yellow]Create fees and residents first.[/yellow]")
        return

    fee_choices = {f"{f.id} - {f.description} ({f.period})": f for f in fees}
    fee_choice = questionary.select("Fee:", choices=list(fee_choices)).ask()
    if fee_choice is None:
        return
    resident_choices = {f"{r.id} - {r.name}": r for r in residents}
    resident_choice = questionary.select("Resident:", choices=list(resident_choices)).ask()
    if resident_choice is None:
        return

    quantity = _ask_int("Quantity (ignored for area fees):", default="1")
    method = questionary.text("Payment method (blank = not yet paid):").ask()

    view = payment_service.create_payment(
        fee_choices[fee_choice].id, resident_choices[resident_choice].id, quantity, method
    )
    console.print(
        f"[green bold]Payment #{view.id} recorded: {format_vnd(view.amount_paid)} ({view.status}).[/green bold]"
    )


def _update_payment(payment_service: PaymentService) -> None:
    payment_id = _ask_int("Payment #:")
    if payment_id is None:
        return
    current = payment_service.get_payment(payment_id)
    console.print(payments_table([current], title="Current"))

    quantity = _ask_int("Quantity:", default=str(current.quantity))
    if quantity is None:
        quantity = current.quantity
    default_method = "" if current.date_paid is None else current.status
    method = questionary.text("Payment method (blank = not yet paid):", default=default_method).ask()
    if method is None:
        return

    view = payment_service.update_payment(payment_id, current.fee_id, current.resident_id, quantity, method)
    console.print(f"[green]Payment #{view.id} updated: {format_vnd(view.amount_paid)} ({view.status}).[/green]")


def _delete_payment(payment_service: PaymentService) -> None:
    payment_id = _ask_int("Payment #:")
    if payment_id is None:
        return
    confirm = questionary.confirm(f"Delete payment #{payment_id}?", default=False).ask()
    if confirm:
        payment_service.delete_payment(payment_id)
        console.print("[green]Payment deleted.[/green]")
