"""Utility functions for salesmaster."""

from salesmaster.utils.phone import normalize_phone
from salesmaster.utils.files import read_import_file

__all__ = ["normalize_phone", "read_import_file"]
