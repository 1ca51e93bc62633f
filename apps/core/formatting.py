from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings

CENTS = Decimal("0.01")


def round_money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount) -> str:
    """
    1500 -> "1 500,00 ₽" (space groups, comma decimals, symbol from settings).
    """
    if amount is None:
        amount = Decimal("0")
    text = f"{round_money(amount):,.2f}".replace(",", " ").replace(".", ",")
    symbol = getattr(settings, "CURRENCY_SYMBOL", "₽")
    return f"{text} {symbol}".strip()
