"""Money display helpers"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

CURRENCY_SYMBOLS = {
    'USD': '$',
    'PKR': '₨',
    'EUR': '€',
    'GBP': '£',
    'INR': '₹',
}


def round_money(value, places=2):
    """Round for display only; never feed the result back into a computation"""
    try:
        return float(Decimal(str(value)).quantize(Decimal('1.' + '0' * places), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError, TypeError):
        return 0.0


def currency_symbol(currency_code):
    return CURRENCY_SYMBOLS.get((currency_code or '').upper(), CURRENCY_SYMBOLS['USD'])


def format_currency(amount, currency_code='USD'):
    """Format amount with the branch currency symbol, e.g. '₨96.30'"""
    if amount is None:
        amount = 0
    return f"{currency_symbol(currency_code)}{round_money(amount):.2f}"
