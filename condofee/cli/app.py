import questionary
from rich.console import Console

from condofee.cli.fee_menu import create_fee_menu, list_fees_menu
from condofee.cli.payment_menu import payments_menu
from condofee.cli.resident_menu import resident_menu
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


def _build_services() -> tuple[FeeService, PaymentService, ResidentService]:
    fee_repo = get_fee_repository()
    payment_repo = get_payment_repository()
    resident_repo = get_resident_repository()
    apartment_repo = get_apartment_repository()
    payment_service = PaymentService(payment_repo, fee_repo, resident_repo)
    return (
        FeeService(fee_repo, resident_repo, payment_repo, payment_service),
        payment_service,
        ResidentService(resident_repo, apartment_repo),
    )


def main_menu() -> None:
    fee_service, payment_service, resident_service = _build_services()

    console.print()
    console.print("[bold]Community Fee Manager[/bold]", style="cyan")
    console.print()

    while True:
        choice = questionary.select(
            "Main Menu",
            choices=[
                "List Fees",
                "Create Fee",
                "Payments",
                "Residents",
                "Exit",
            ],
        ).ask()

        if choice is None or choice == "Exit":
            console.print("[bold]Goodbye![/bold]")
            break
        elif choice == "List Fees":
            list_fees_menu(fee_service)
        elif choice == "Create Fee":
            create_fee_menu(fee_service)
        elif choice == "Payments":
            payments_menu(payment_service, fee_service, resident_service)
        elif choice == "Residents":
            resident_menu(resident_service, payment_service)
