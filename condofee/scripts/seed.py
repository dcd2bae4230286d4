"""Seed the database with demo data for local development.

Usage:
    python -m condofee.scripts.seed
"""

from __future__ import annotations

import random
from datetime import datetime

from faker import Faker
from rich.console import Console
from rich.table import Table
from sqlalchemy import text

from condofee.constants import LOCAL_TZ
from condofee.db import get_connection, initialize_db
from condofee.models import format_vnd
from condofee.models.fee import FeeType
from condofee.models.resident import Apartment, VehicleCategory
from condofee.repositories.factory import (
    get_apartment_repository,
    get_fee_repository,
    get_payment_repository,
    get_resident_repository,
)
from condofee.services.fee_service import FeeService
from condofee.services.payment_service import PaymentService
from condofee.services.resident_service import ResidentService

console = Console()
fake = Faker("vi_VN")

NUM_FLOORS = 5
APARTMENTS_PER_FLOOR = 4

# Child tables first
TABLES_TO_CLEAR = ["payments", "residents", "vehicles", "apartments", "fees"]

# (description, type, unit amount, compulsory)
FEE_TEMPLATES = [
    ("Service charge", FeeType.AREA, 7000, True),
    ("Parking", FeeType.VEHICLE, 0, True),
    ("Cleaning", FeeType.PER_UNIT, 60000, True),
    ("Charity fund", FeeType.PER_UNIT, 50000, False),
]

PAYMENT_METHODS = ["cash", "transfer", "card"]


def _clear_all(conn) -> None:
    console.print("\n[yellow]Clearing all tables...[/yellow]")
    for table in TABLES_TO_CLEAR:
        conn.execute(text(f"DELETE FROM {table}"))  # noqa: S608
        console.print(f"  Cleared [dim]{table}[/dim]")
    conn.commit()
    console.print("[green]All tables cleared.[/green]\n")


def _create_apartments(resident_service: ResidentService) -> list[Apartment]:
    console.print("[cyan]Creating apartments...[/cyan]")
    apartments = []
    for floor in range(1, NUM_FLOORS + 1):
        for unit in range(1, APARTMENTS_PER_FLOOR + 1):
            apartment = resident_service.create_apartment(
                number=f"{floor}{unit:02d}", area=random.choice([45, 60, 75, 80, 95, 120]), floor=floor
            )
            for _ in range(random.randint(0, 3)):
                category = random.choices(
                    [VehicleCategory.CAR, VehicleCategory.MOTORBIKE, VehicleCategory.BICYCLE], weights=[2, 6, 1]
                )[0]
                resident_service.register_vehicle(apartment.id, fake.license_plate(), category)
            apartments.append(apartment)
    console.print(f"[green]{len(apartments)} apartments created.[/green]\n")
    return apartments


def _create_residents(resident_service: ResidentService, apartments: list[Apartment]) -> int:
    console.print("[cyan]Creating residents...[/cyan]")
    count = 0
    for apartment in apartments:
        for _ in range(random.randint(1, 3)):
            resident_service.create_resident(
                name=fake.name(),
                apartment_id=apartment.id,
                gender=random.choice(["male", "female"]),
                phone=fake.phone_number(),
            )
            count += 1
    console.print(f"[green]{count} residents created.[/green]\n")
    return count


def _create_fees(fee_service: FeeService, payment_service: PaymentService) -> int:
    console.print("[cyan]Creating fees and billing residents...[/cyan]")
    today = datetime.now(LOCAL_TZ).date()

    table = Table(title="Fees")
    table.add_column("Fee")
    table.add_column("Type")
    table.add_column("Unit amount", justify="right")
    table.add_column("Payments", justify="right")

    total = 0
    for description, fee_type, amount, compulsory in FEE_TEMPLATES:
        fee, generated = fee_service.create_fee(
            fee_type, amount, today.year, today.month, description=description, compulsory=compulsory
        )
        for row in fee_service.list_payments(fee.id):
            if random.random() < 0.6:
                payment_service.update_payment(
                    row.payment.id,
                    fee.id,
                    row.payment.resident_id,
                    row.payment.quantity,
                    random.choice(PAYMENT_METHODS),
                )
        table.add_row(description, fee_type.value, format_vnd(amount), str(generated))
        total += generated

    console.print(table)
    console.print(f"\n[green]{total} payments generated.[/green]\n")
    return total


def main() -> None:
    console.print("[bold magenta]condofee: Database Seeder[/bold magenta]")
    console.print("=" * 40)

    initialize_db()
    _clear_all(get_connection())

    fee_repo = get_fee_repository()
    payment_repo = get_payment_repository()
    resident_repo = get_resident_repository()
    resident_service = ResidentService(resident_repo, get_apartment_repository())
    payment_service = PaymentService(payment_repo, fee_repo, resident_repo)
    fee_service = FeeService(fee_repo, resident_repo, payment_repo, payment_service)

    apartments = _create_apartments(resident_service)
    residents = _create_residents(resident_service, apartments)
    payments = _create_fees(fee_service, payment_service)

    console.print("[bold green]Seeding complete![/bold green]")
    console.print(f"  Apartments: {len(apartments)}")
    console.print(f"  Residents:  {residents}")
    console.print(f"  Fees:       {len(FEE_TEMPLATES)}")
    console.print(f"  Payments:   {payments}")


if __name__ == "__main__":  # pragma: no cover
    main()
