from pasetomint.exceptions import MalformedPairError, MissingKeyError, MissingValueError


def parse_custom_claim(raw: str) -> tuple[str, str]:
    """
    Split a ``KEY=VALUE`` string on its first ``=``.

    Both sides are trimmed and must be non-empty; the value may itself
    contain ``=``.
    """
    key, separator, value = raw.partition("=")
    if not separator:
        raise MalformedPairError(raw)

    key, value = key.strip(), value.strip()
    if not key:
        raise MissingKeyError()
    if not value:
        raise MissingValueError(key)
    return key, value
