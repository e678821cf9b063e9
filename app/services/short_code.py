"""
Short codes for candidate test links.

Codes come from a 32-bit string hash, so they are not collision-resistant;
the tests.short_code unique constraint catches the rare clash.
"""

# No 0/O or 1/I
CHARSET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 6


def _hash32(value: str) -> int:
    """h = h * 31 + ord(c), wrapped to a signed 32-bit integer."""
    h = 0
    for char in value:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def generate_short_code(test_id) -> str:
    """
    Derive a 6-character code from a test id.

    Example: generate_short_code(42) -> "AAABV8"
    """
    num = abs(_hash32(str(test_id)))

    code = ""
    while num > 0 or len(code) < CODE_LENGTH:
        code = CHARSET[num % len(CHARSET)] + code
        num //= len(CHARSET)

    return code[:CODE_LENGTH]
