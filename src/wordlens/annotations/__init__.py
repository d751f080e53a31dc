"""WordLens annotations package — identifier decoding, aggregation, presentation."""
from wordlens.annotations.decoder import DecodedAnnotation, NotAnnotated, decode_identifier
from wordlens.annotations.aggregator import AnnotationTable, aggregate
from wordlens.annotations.markup import extract_identifiers
from wordlens.annotations.table import COLUMNS, export_table, sort_records

__all__ = [
    "DecodedAnnotation",
    "NotAnnotated",
    "decode_identifier",
    "AnnotationTable",
    "aggregate",
    "extract_identifiers",
    "COLUMNS",
    "export_table",
    "sort_records",
]
