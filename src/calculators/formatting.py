"""Indian-style number formatting for labels and reports."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

RUPEE = "₹"


def group_digits(digits: str) -> str:
    """Group an unsigned integer string the Indian way: 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_number(value: Decimal, places: int = 2) -> str:
    """Format a number with Indian grouping and at most ``places`` decimals."""
    with localcontext() as ctx:
        # Room for every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        quantized = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        sign = "-" if quantized < 0 else ""
        whole, _, fraction = f"{abs(quantized):f}".partition(".")
    fraction = fraction.rstrip("0")
    grouped = group_digits(whole)
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_rupees(value: Decimal, symbol: str = RUPEE) -> str:
    """Format a currency amount rounded to whole rupees, e.g. ₹1,40,000."""
    rounded = int(value.to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{group_digits(str(abs(rounded)))}"


def format_rate(rate: Decimal) -> str:
    """Format a fractional rate as a percentage label, e.g. 0.125 -> 12.5%."""
    percent = (rate * 100).normalize()
    return f"{percent:f}%"


def format_range(lower: Decimal, upper: Decimal | None, symbol: str = RUPEE) -> str:
    """Label a slab by its bounds."""
    if upper is None:
        return f"{symbol}{format_number(lower)} and above"
    return f"{symbol}{format_number(lower)} - {symbol}{format_number(upper)}"
