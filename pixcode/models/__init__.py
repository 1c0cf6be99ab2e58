from decimal import Decimal, InvalidOperation


def format_brl(amount: Decimal) -> str:
    """Format an amount in reais as BRL string: Decimal('2850') -> 'R$ 2.850,00'"""
    formatted = f"{amount:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {formatted}"


def parse_brl(text: str) -> Decimal | None:
    """Parse a BRL amount string into a Decimal. Returns None on invalid input.

    Accepts formats like '2850', '2850.00', '2.850,00', '2850,50'.
    """
    text = text.strip()
    if not text:
        return None
    # Handle PT-BR format: '2.850,00' -> '2850.00'
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value
