import re

_base32_re = re.compile(r'^[A-Z2-7]*={0,6}$', re.IGNORECASE)
_unsafe_filename_re = re.compile(r'[^A-Za-z0-9_-]')


def normalize_base32(secret: str) -> str:
    """Strip whitespace so grouped secrets ("JBSW Y3DP ...") decode"""
    return "".join(secret.split())


def is_valid_base32(secret: str, min_length: int = 0) -> bool:
    """Check if string is valid Base32 with at least min_length symbols"""
    secret_clean = normalize_base32(secret)
    if not _base32_re.match(secret_clean):
        return False
    return len(secret_clean.rstrip("=")) >= min_length


def sanitize_filename(raw: str) -> str:
    """Keep only ASCII letters, digits, '-' and '_'"""
    return _unsafe_filename_re.sub("", raw)
