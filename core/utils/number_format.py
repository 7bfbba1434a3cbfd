"""
Number formatting cho token totals.

Nhom chu so theo cum 3 tu phai sang trai, phan cach bang MOT dau cach:
    1234567 -> "1 234 567"
    999     -> "999"
    1000    -> "1 000"
"""


def format_number(number: int) -> str:
    """
    Format so nguyen voi dau cach lam thousands separator.

    Args:
        number: So can format (am van giu dau "-" o dau)

    Returns:
        Chuoi da nhom chu so
    """
    # Python format spec chi ho tro "," va "_" -> thay "," bang dau cach
    return f"{number:,}".replace(",", " ")
