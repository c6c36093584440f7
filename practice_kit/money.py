"""
Money Handling Module

Normalizes amounts to Decimal and formats them for display. NEVER uses
float arithmetic for balances: floats are converted through their string
form before they reach an account.
"""

from decimal import Decimal, Inexact, InvalidOperation, ROUND_HALF_UP, localcontext

from .errors import InvalidAmountError


ZERO = Decimal("0")


def decimal_from_string(value: str) -> Decimal:
    """
    Convert string to Decimal, handling common formats
    
    Args:
        value: String representation of number ("1500", "1,500.25", "1.000,50", "12,5")
        
    Returns:
        Decimal value
        
    Raises:
        InvalidAmountError: If string cannot be converted to a finite Decimal
    """
    clean_value = value.strip().replace(" ", "").replace("_", "")
    if not clean_value:
        raise InvalidAmountError("Amount must be a non-empty number", amount=value)
    
    # The separator that comes last is the decimal point (European "1.000,50")
    if ',' in clean_value and '.' in clean_value:
        if clean_value.rfind(',') > clean_value.rfind('.'):
            clean_value = clean_value.replace('.', '').replace(',', '.')
        else:
            clean_value = clean_value.replace(',', '')
    elif ',' in clean_value:
        parts = clean_value.split(',')
        if len(parts) == 2 and len(parts[1]) <= 2:  # Likely decimal separator
            clean_value = clean_value.replace(',', '.')
        else:  # Thousands separators
            clean_value = clean_value.replace(',', '')
    
    try:
        result = Decimal(clean_value)
    except InvalidOperation:
        raise InvalidAmountError(f"Cannot convert '{value}' to an amount", amount=value) from None
    
    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got '{value}'", amount=value)
    return result


def to_amount(value) -> Decimal:
    """
    Normalize an amount given as Decimal, int, float or numeric string
    
    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidAmountError("Amount must be a number, not a boolean", amount=value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidAmountError(f"Amount must be a finite number, got {value}", amount=value)
        return value
    if isinstance(value, (int, float)):
        return decimal_from_string(str(value))
    if isinstance(value, str):
        return decimal_from_string(value)
    raise InvalidAmountError(f"Unsupported amount type: {type(value).__name__}", amount=value)


def format_amount(amount: Decimal, precision: int = 2) -> str:
    """Format for display, e.g. 1300 -> '1,300.00'"""
    with localcontext() as ctx:
        # Room for every integer digit plus the fractional places
        ctx.prec = max(ctx.prec, amount.adjusted() + precision + 2)
        rounded = amount.quantize(Decimal('0.1') ** precision, rounding=ROUND_HALF_UP)
    return f"{rounded:,.{precision}f}"


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """
    Add two amounts without rounding
    
    Raises:
        InvalidAmountError: If the sum needs more digits than the decimal context holds
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return a + b
        except Inexact:
            raise InvalidAmountError(
                f"Adding {b} to {a} would need rounding", amount=b
            ) from None


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    """Subtract without rounding, same rules as exact_add()"""
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return a - b
        except Inexact:
            raise InvalidAmountError(
                f"Subtracting {b} from {a} would need rounding", amount=b
            ) from None
