"""
Input/Output modules for separation3d.
"""

from .obj_exporter import (
    ExportStats,
    export_obj,
    validate_obj_file,
)

__all__ = [
    'ExportStats',
    'export_obj',
    'validate_obj_file',
]
