"""coverfit: resize album art embedded in the ID3v2 tags of MP3 files."""

__version__ = "0.1.0"
