from datetime import date

CRORE = 10_000_000
LAKH = 100_000


def current_calendar_year() -> int:
    return date.today().year


def group_indian(value: int) -> str:
    """
    Indian digit grouping (en-IN): last three digits, then pairs.
    1234567 -> "12,34,567"
    """
    sign = "-" if value < 0 else ""
    digits = str(abs(int(value)))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_indian_price(price: int, symbol: str = "₹") -> str:
    """
    Display-only formatting:
    - >= 1 crore -> "₹1.26 Cr"
    - >= 1 lakh  -> "₹20.00 L"
    - otherwise  -> grouped integer, "₹99,999"
    """
    if price >= CRORE:
        return f"{symbol}{price / CRORE:.2f} Cr"
    if price >= LAKH:
        return f"{symbol}{price / LAKH:.2f} L"
    return f"{symbol}{group_indian(price)}"
