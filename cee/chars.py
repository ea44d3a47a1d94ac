"""Character classes used by the tokenizer."""


def is_whitespace(c: str) -> bool:
    """Return True for a space or a tab."""
    return c in (" ", "\t") and c != ""


def is_digit(c: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def is_lowercase(c: str) -> bool:
    """Return True for an ASCII lowercase letter."""
    return len(c) == 1 and "a" <= c <= "z"


def is_uppercase(c: str) -> bool:
    """Return True for an ASCII uppercase letter."""
    return len(c) == 1 and "A" <= c <= "Z"


def is_latin(c: str) -> bool:
    """Return True for an ASCII letter."""
    return is_lowercase(c) or is_uppercase(c)


def is_start_ident(c: str) -> bool:
    """Return True for a character that may begin an identifier."""
    return is_latin(c) or c == "_" or c == "@"


def is_ident(c: str) -> bool:
    """Return True for a character that may appear inside an identifier."""
    return is_start_ident(c) or is_digit(c)