from __future__ import annotations

from os import environ
from typing import TextIO

from pyseto import Key, KeyInterface

from pasetomint.exceptions import KeyMaterialError

KEY_LENGTH = 32


class KeyManager:
    """
    Holds the symmetric v4.local key shared by the generate and validate workflows.

    The key is supplied out-of-band as a string whose UTF-8 encoding is
    exactly 32 bytes; surrounding whitespace is ignored.
    """

    def __init__(self, key: str) -> None:
        raw = key.strip().encode("utf-8")
        if not raw:
            raise KeyMaterialError(
                "No key was provided. Pipe a 32-byte v4 key on stdin, for example:\n\n"
                "    echo wubbalubbadubdubwubbalubbadubdub | pasetomint generate"
            )
        if len(raw) != KEY_LENGTH:
            raise KeyMaterialError(
                f"A v4.local key must be exactly {KEY_LENGTH} bytes, got {len(raw)}"
            )
        self._key: KeyInterface = Key.new(version=4, purpose="local", key=raw)

    @classmethod
    def from_stream(cls, stream: TextIO) -> KeyManager:
        """Read the whole stream (typically stdin) as key material."""
        try:
            key = stream.read()
        except UnicodeDecodeError as error:
            raise KeyMaterialError("The key read from stdin is not valid UTF-8") from error
        return cls(key)

    @classmethod
    def from_environ(cls, variable: str = "PASETOMINT_KEY") -> KeyManager:
        key = environ.get(variable)
        if not key:
            raise KeyMaterialError(
                f"The {variable} environment variable is missing. "
                "Either pipe the key on stdin or set it, for example:\n\n"
                f"    {variable} = 'wubbalubbadubdubwubbalubbadubdub'"
            )
        return cls(key)

    @property
    def paseto_key(self) -> KeyInterface:
        return self._key
