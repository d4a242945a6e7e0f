from .accents import ACCENT_TABLE, consolidate
from .aesthetic import AESTHETIC_TABLE, fold
from .diacritics import DIACRITIC_TABLE, strip
from .pipeline import normalize, trace
from .table import MappingTable, TableError, build_table
from .types import NormalizationTrace

__all__ = [
    "ACCENT_TABLE",
    "AESTHETIC_TABLE",
    "DIACRITIC_TABLE",
    "MappingTable",
    "NormalizationTrace",
    "TableError",
    "build_table",
    "consolidate",
    "fold",
    "normalize",
    "strip",
    "trace",
]
