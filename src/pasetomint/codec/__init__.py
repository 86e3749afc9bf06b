from ._local_codec import TOKEN_HEADER, LocalTokenCodec

__all__ = ["TOKEN_HEADER", "LocalTokenCodec"]
