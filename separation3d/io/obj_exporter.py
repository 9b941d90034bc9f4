"""
OBJ mesh exporter for separation3d.

Exports lifted features to Wavefront OBJ format:
- Z up, projected map coordinates
- Optional per-feature groups
- One material line per feature kind (e.g. 'usemtl Separation')
"""

import os
from typing import Iterable, List, Optional
from dataclasses import dataclass
import logging

from ..config import OBJ_EXPORT_GROUPS, OBJ_VERTEX_PRECISION
from ..features.base import TopoFeature

logger = logging.getLogger(__name__)


@dataclass
class ExportStats:
    """Statistics from OBJ export."""
    total_vertices: int = 0
    total_faces: int = 0
    total_features: int = 0
    skipped_features: int = 0
    file_size_bytes: int = 0


def export_obj(
    features: Iterable[TopoFeature],
    filepath: str,
    use_groups: bool = OBJ_EXPORT_GROUPS,
    comment: Optional[str] = None,
    precision: int = OBJ_VERTEX_PRECISION
) -> ExportStats:
    """
    Export lifted features to a single OBJ file.

    Features that have not been lifted are skipped and counted.

    Args:
        features: Features to export
        filepath: Output file path (.obj)
        use_groups: If True, create a 'g' group per feature id
        comment: Optional comment to include in file header
        precision: Decimal places for vertex coordinates

    Returns:
        ExportStats with export statistics
    """
    stats = ExportStats()

    vertex_lines: List[str] = []
    face_blocks: List[List[str]] = []

    for feature in features:
        mesh = feature.mesh
        if mesh is None or mesh.is_empty():
            stats.skipped_features += 1
            logger.debug(f"Skipping unlifted feature {feature.id} in OBJ export")
            continue

        vertices, faces = mesh.to_indexed()
        vertex_offset = len(vertex_lines)

        for x, y, z in vertices:
            vertex_lines.append(
                f"v {x:.{precision}f} {y:.{precision}f} {z:.{precision}f}"
            )

        block: List[str] = []
        if use_groups:
            block.append(f"g {feature.id}")
        block.append(feature.get_mtl())
        for face in faces:
            block.append("f " + " ".join(str(idx + vertex_offset) for idx in face))

        face_blocks.append(block)
        stats.total_faces += len(faces)
        stats.total_features += 1

    stats.total_vertices = len(vertex_lines)

    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        # Header comment
        f.write("# separation3d OBJ Export\n")
        f.write(f"# Vertices: {stats.total_vertices}\n")
        f.write(f"# Faces: {stats.total_faces}\n")
        f.write(f"# Features: {stats.total_features}\n")

        if comment:
            f.write(f"# {comment}\n")

        f.write("\n")

        for line in vertex_lines:
            f.write(line + "\n")

        for block in face_blocks:
            f.write("\n")
            for line in block:
                f.write(line + "\n")

    stats.file_size_bytes = os.path.getsize(filepath)

    logger.info(
        f"Exported OBJ: {stats.total_vertices} vertices, "
        f"{stats.total_faces} faces, {stats.total_features} features"
        + (f" ({stats.skipped_features} unlifted skipped)" if stats.skipped_features else "")
    )

    return stats


def validate_obj_file(filepath: str) -> List[str]:
    """
    Validate an exported OBJ file.

    Checks that every face references existing vertices and is a triangle.

    Args:
        filepath: Path to OBJ file

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if not os.path.exists(filepath):
        return [f"File not found: {filepath}"]

    vertex_count = 0
    face_count = 0

    with open(filepath, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()

            if line.startswith('v '):
                parts = line.split()
                if len(parts) != 4:
                    errors.append(f"Line {line_num}: vertex must have 3 coordinates")
                vertex_count += 1

            elif line.startswith('f '):
                indices = line.split()[1:]
                face_count += 1

                if len(indices) != 3:
                    errors.append(f"Line {line_num}: face is not a triangle")

                for token in indices:
                    try:
                        idx = int(token.split('/')[0])
                    except ValueError:
                        errors.append(f"Line {line_num}: invalid face index '{token}'")
                        continue

                    if idx < 1 or idx > vertex_count:
                        errors.append(
                            f"Line {line_num}: face index {idx} out of range "
                            f"(1-{vertex_count})"
                        )

    if face_count == 0:
        errors.append("File has no faces")

    return errors
