"""Adapters binding the covers feature to third-party codecs."""

from .mutagen_tag_codec import MutagenTagCodec, MutagenTagHandle

__all__ = ["MutagenTagCodec", "MutagenTagHandle"]
