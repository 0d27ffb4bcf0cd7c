from .io import read_words

__all__ = ["read_words"]
