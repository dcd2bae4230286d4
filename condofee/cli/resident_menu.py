from __future__ import annotations

import questionary
from rich.console import Console
from rich.table import Table

from condofee.cli.payment_menu import payments_table
from condofee.constants import CATEGORY_LABELS
from condofee.errors import InvalidInputError, NotFoundError
from condofee.models.resident import VehicleCategory
from condofee.services.payment_service import PaymentService
from condofee.services.resident_service import ResidentService

console = Console()

_CATEGORY_CHOICES = {label: category for category, label in CATEGORY_LABELS.items()}


def resident_menu(resident_service: ResidentService, payment_service: PaymentService) -> None:
    while True:
        choice = questionary.select(
            "Residents",
            choices=["List Residents", "Resident Payments", "Register Vehicle", "Back"],
        ).ask()

        if choice is None or choice == "Back":
            break
        try:
            if choice == "List Residents":
                _list_residents(resident_service)
            elif choice == "Resident Payments":
                _resident_payments(resident_service, payment_service)
            elif choice == "Register Vehicle":
                _register_vehicle(resident_service)
        except (NotFoundError, InvalidInputError) as e:
            console.print(f"[red]{e}[/red]")


def _list_residents(resident_service: ResidentService) -> None:
    search = questionary.text("Search by name or phone (optional):").ask() or ""
    residents = resident_service.list_residents(search=search)
    if not residents:
        console.print("[yellow]No residents found.[/yellow]")
        return

    table = Table(title="Residents")
    table.add_column("#", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Apartment")
    table.add_column("Area", justify="right")
    table.add_column("Vehicles", justify="right")
    for r in residents:
        apartment = r.apartment
        table.add_row(
            str(r.id),
            r.name,
            apartment.number if apartment else "-",
            str(apartment.area) if apartment else "-",
            str(len(apartment.vehicles)) if apartment else "-",
        )
    console.print(table)


def _resident_payments(resident_service: ResidentService, payment_service: PaymentService) -> None:
    residents = resident_service.list_residents()
    if not residents:
        console.print("[yellow]No residents found.[/yellow]")
        return
    choices = {f"{r.id} - {r.name}": r for r in residents}
    choice = questionary.select("Resident:", choices=list(choices) + ["Back"]).ask()
    if choice is None or choice == "Back":
        return
    resident = choices[choice]
    payments = payment_service.list_for_resident(resident.id)
    if not payments:
        console.print("[yellow]No payments for this resident.[/yellow]")
        return
    console.print(payments_table(payments, title=f"Payments - {resident.name}"))


def _register_vehicle(resident_service: ResidentService) -> None:
    apartments = resident_service.list_apartments()
    if not apartments:
        console.print("[yellow]No apartments registered.[/yellow]")
        return
    choices = {f"{a.number} (floor {a.floor})": a for a in apartments}
    choice = questionary.select("Apartment:", choices=list(choices)).ask()
    if choice is None:
        return
    plate = questionary.text("Plate:").ask()
    if not plate:
        console.print("[yellow]Cancelled.[/yellow]")
        return
    label = questionary.select("Category:", choices=list(_CATEGORY_CHOICES)).ask()
    if label is None:
        return
    category: VehicleCategory = _CATEGORY_CHOICES[label]
    vehicle = resident_service.register_vehicle(choices[choice].id, plate, category)
    console.print(f"[green]Vehicle {vehicle.plate} registered.[/green]")
