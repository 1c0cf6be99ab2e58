import questionary
from rich.console import Console

from pixcode.cli.pix_menu import generate_pix_menu
from pixcode.render.factory import get_renderer
from pixcode.services.payment_code_service import PaymentCodeService

console = Console()


def _build_service() -> PaymentCodeService:
    return PaymentCodeService(get_renderer())


def main_menu() -> None:
    service = _build_service()

    console.print()
    console.print("[bold]Gerador de QR Code PIX[/bold]", style="cyan")
    console.print()

    while True:
        choice = questionary.select(
            "Menu Principal",
            choices=[
                "Gerar PIX",
                "Sair",
            ],
        ).ask()

        if choice is None or choice == "Sair":
            console.print("[bold]Até logo![/bold]")
            break
        elif choice == "Gerar PIX":
            generate_pix_menu(service)
