"""Dictionary-first transliteration of Arabic and Persian text into Latin script,
with command-line tools for text, sample comparison and Dolt database updates."""

__version__ = "0.1.0"