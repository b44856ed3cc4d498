"""
Domain package for the item loader.

Exports the record model and its builders. Keep this package focused on data
definitions and validation concerns.
"""

from item_loader.domain.models import FILLER_TEXT, Record, build_batch_record, build_record

__all__ = [
    "FILLER_TEXT",
    "Record",
    "build_batch_record",
    "build_record",
]
