"""Text helpers for embedding symbols in JSON metadata."""


def escape_quotes(symbol: str) -> str:
    """
    Escape double quotes with a backslash.

    Args:
        symbol: Arbitrary token symbol

    Returns:
        The same object when it has no quotes, otherwise an escaped copy
    """
    if '"' not in symbol:
        return symbol

    # len(result) == len(symbol) + symbol.count('"')
    escaped = []
    for char in symbol:
        if char == '"':
            escaped.append("\\")
        escaped.append(char)
    return "".join(escaped)
