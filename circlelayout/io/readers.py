"""
I/O Readers

Reads child tables (TSV) into Child objects.
"""

from __future__ import annotations
from typing import List
from pathlib import Path
import logging
import pandas as pd

from ..layout import Child
from ..types import ChildRecord, PathLike

logger = logging.getLogger(__name__)


class ChildTableReader:
    """Reads tab-separated child tables"""

    REQUIRED_COLUMNS = ('id', 'width', 'height')

    @staticmethod
    def load_records(child_file: PathLike) -> List[ChildRecord]:
        """
        Load and normalize the rows of a child table

        Expected columns: id, width, height and optionally visibility
        (visible, invisible or gone; visible when missing or empty).
        Empty id cells mean the child has no identifier.

        Args:
            child_file: Path to TSV file with a header row

        Returns:
            List of dicts with 'id', 'width', 'height', 'visibility' keys

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if required columns are missing or sizes are not numeric
        """
        path = Path(child_file)
        if not path.exists():
            raise FileNotFoundError(f"Child table not found: {path}")

        # Only empty cells are missing: ids such as 'NA' or 'node#1' are kept verbatim
        table = pd.read_csv(path, sep='\t', dtype=str, keep_default_na=False, na_values=[''])
        table.columns = [str(col).strip().lower() for col in table.columns]

        missing = [col for col in ChildTableReader.REQUIRED_COLUMNS if col not in table.columns]
        if missing:
            raise ValueError(f"Child table {path} is missing column(s): {', '.join(missing)}")

        for col in ('width', 'height'):
            converted = pd.to_numeric(table[col], errors='coerce')
            bad = converted.isna()
            if bad.any():
                rows = ', '.join(str(i + 2) for i in table.index[bad])
                raise ValueError(f"Non-numeric {col} in {path} at line(s) {rows}")
            table[col] = converted.astype(float)

        if 'visibility' not in table.columns:
            table['visibility'] = 'visible'
        table['visibility'] = table['visibility'].fillna('visible').str.strip().str.lower()

        records: List[ChildRecord] = [
            {
                'id': None if pd.isna(child_id) or not str(child_id).strip() else str(child_id).strip(),
                'width': float(width),
                'height': float(height),
                'visibility': visibility,
            }
            for child_id, width, height, visibility in zip(table['id'], table['width'], table['height'], table['visibility'])
        ]
        logger.debug(f"Read {len(records)} child rows from {path}")
        return records

    @staticmethod
    def load_children(child_file: PathLike) -> List[Child]:
        """
        Load a child table as Child objects, in file order

        Raises:
            ConfigurationError: for negative sizes or unknown visibility values
        """
        return [
            Child(record['id'], record['width'], record['height'], record['visibility'])
            for record in ChildTableReader.load_records(child_file)
        ]


def read_children(child_file: PathLike) -> List[Child]:
    """Convenience wrapper around ChildTableReader.load_children"""
    return ChildTableReader.load_children(child_file)
