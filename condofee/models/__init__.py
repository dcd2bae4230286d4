def format_vnd(amount: int) -> str:
    """Format a whole-dong amount: 1200000 -> '1.200.000 ₫'"""
    formatted = f"{amount:,}".replace(",", ".")
    return f"{formatted} ₫"


def parse_amount(text: str) -> int | None:
    """Parse a whole-unit amount string. Returns None on invalid input.

    Accepts formats like '1200000', '1.200.000', '1,200,000', '1 200 000'.
    """
    text = text.strip()
    if not text:
        return None
    for sep in (".", ",", " "):
        text = text.replace(sep, "")
    if not text.isdigit():
        return None
    return int(text)
