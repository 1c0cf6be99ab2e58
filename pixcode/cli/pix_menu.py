from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import questionary
from rich.console import Console
from rich.table import Table

from pixcode.exceptions import PaymentCodeError
from pixcode.models import format_brl, parse_brl
from pixcode.models.payment_code import PaymentCode
from pixcode.services.payment_code_service import PaymentCodeService
from pixcode.settings import settings

console = Console()

_EXTENSIONS = {"image/png": "png", "image/svg+xml": "svg"}


# Returned by _ask_amount when the prompt is aborted (Ctrl-C).
_CANCELLED = object()


def _ask_amount() -> Decimal | None | object:
    while True:
        amount_str = questionary.text("Valor (R$) - deixe em branco para valor livre:").ask()
        if amount_str is None:
            return _CANCELLED
        if not amount_str.strip():
            return None
        parsed = parse_brl(amount_str)
        if parsed is not None and parsed > 0:
            return parsed
        console.print("[red]Valor inválido. Tente novamente.[/red]")


def generate_pix_menu(service: PaymentCodeService) -> PaymentCode | None:
    console.print()
    console.print("[bold]Novo QR Code PIX[/bold]", style="cyan")

    key = questionary.text("Chave PIX (CPF, CNPJ, email, telefone ou chave aleatória):", default=settings.pix_key).ask()
    if not key:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return None

    name = questionary.text("Nome do recebedor:", default=settings.pix_merchant_name).ask()
    if not name:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return None

    city = questionary.text("Cidade:", default=settings.pix_merchant_city).ask()
    if not city:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return None

    amount = _ask_amount()
    if amount is _CANCELLED:
        console.print("[yellow]Operação cancelada.[/yellow]")
        return None

    note = questionary.text("Descrição (opcional):").ask() or None

    try:
        request = service.build_request(key, name, city, amount=amount, note=note)
        code = service.generate(request)
    except PaymentCodeError as exc:
        console.print(f"[red]Não foi possível gerar o código PIX: {exc}[/red]")
        return None

    _show_details(code)

    if questionary.confirm("Salvar imagem do QR Code?", default=False).ask():
        path = _save_image(service, code)
        console.print(f"[green]QR Code salvo em {path}[/green]")

    return code


def _show_details(code: PaymentCode) -> None:
    request = code.request

    table = Table(title="Detalhes da Transação", show_header=False)
    table.add_column("Campo", style="dim")
    table.add_column("Valor", style="bold")
    table.add_row("Recebedor", request.payee_name)
    table.add_row("Cidade", request.payee_city)
    if request.amount is not None:
        table.add_row("Valor", f"[green]{format_brl(request.amount)}[/green]")
    if request.note is not None:
        table.add_row("Descrição", request.note)

    console.print()
    console.print(table)
    console.print()
    console.print("[bold]Código PIX (Copia e Cola)[/bold]")
    console.print(code.payload, soft_wrap=True, highlight=False)
    console.print("[dim]Copie e cole este código no app do seu banco.[/dim]")


def _save_image(service: PaymentCodeService, code: PaymentCode) -> str:
    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    ext = _EXTENSIONS.get(code.content_type, "bin")
    # The CRC trailer identifies the payload well enough for a file name.
    path = output_dir / f"pix-{code.payload[-4:]}.{ext}"
    path.write_bytes(service.render_image(code.payload))
    return str(path.resolve())
