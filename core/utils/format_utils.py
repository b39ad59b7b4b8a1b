"""
Format Utilities - Format so va kich thuoc cho report.
"""


def format_number(n: int) -> str:
    """Format so nguyen voi dau phan cach hang nghin (1234567 -> "1,234,567")."""
    return f"{n:,}"


def format_bytes(size: int) -> str:
    """
    Format kich thuoc file.

    512 -> "512 B", 1536 -> "1.50 KB", 2097152 -> "2.00 MB"
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


def format_cost(amount: float) -> str:
    """Format chi phi USD voi 2 chu so thap phan."""
    return f"{amount:.2f}"
