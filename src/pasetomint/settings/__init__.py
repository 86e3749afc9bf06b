from ._settings import OUTPUT_FORMATS, Settings

__all__ = ["OUTPUT_FORMATS", "Settings"]
