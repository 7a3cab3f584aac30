"""
I/O Writers

Writes layout results as placement tables.
"""

from pathlib import Path
import logging

from ..layout import LayoutResult
from ..types import PathLike

logger = logging.getLogger(__name__)


class PlacementWriter:
    """Writes placements in TSV format"""

    def __init__(self, float_precision: int = 3):
        """
        Initialize placement writer

        Args:
            float_precision: Decimals kept for coordinates and angles
        """
        self.float_precision = float_precision

    def write(self, result: LayoutResult, output_file: PathLike) -> Path:
        """
        Write one row per placement

        Columns: index, id, x, y, left, top, right, bottom, width, height,
        angle_deg (empty for the center child), radius, is_center.

        Args:
            result: Layout to write
            output_file: Path to output TSV file

        Returns:
            Path of the written file
        """
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        table = result.to_frame()
        if table.empty:
            logger.warning("No placements to save, writing header only")

        float_columns = ['x', 'y', 'left', 'top', 'right', 'bottom', 'width', 'height', 'angle_deg', 'radius']
        table[float_columns] = table[float_columns].astype(float).round(self.float_precision)
        # -0.0 from rounding tiny negative offsets
        table[float_columns] = table[float_columns] + 0.0

        table.to_csv(output_path, sep='\t', index=False, na_rep='')
        logger.info(f"Wrote {len(table)} placements to {output_path}")
        return output_path


def write_placements(result: LayoutResult, output_file: PathLike, float_precision: int = 3) -> Path:
    """Convenience wrapper around PlacementWriter.write"""
    return PlacementWriter(float_precision).write(result, output_file)
