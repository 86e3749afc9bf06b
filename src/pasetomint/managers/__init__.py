from ._key_manager import KEY_LENGTH, KeyManager

__all__ = ["KEY_LENGTH", "KeyManager"]
