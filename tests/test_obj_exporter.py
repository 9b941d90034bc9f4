"""
Tests for separation3d.io.obj_exporter.
"""

import pytest

from separation3d.features import SeparationFeature
from separation3d.io import export_obj, validate_obj_file


@pytest.fixture
def unlifted_feature(l_shape):
    return SeparationFeature(l_shape, "sep-empty")


class TestExportObj:
    """Tests for export_obj."""

    def test_single_feature(self, lifted_square, tmp_path):
        path = tmp_path / "out.obj"
        stats = export_obj([lifted_square], str(path))

        assert stats.total_features == 1
        assert stats.total_vertices == 8
        assert stats.total_faces == 10
        assert stats.file_size_bytes == path.stat().st_size

        text = path.read_text(encoding="utf-8")
        assert text.startswith("# separation3d OBJ Export")
        assert "g sep-1\n" in text
        assert "usemtl Separation\n" in text
        assert "v 0.000 0.000 11.600\n" in text
        assert validate_obj_file(str(path)) == []

    def test_vertex_offsets(self, lifted_square, unit_square, tmp_path):
        other = SeparationFeature([(x + 5, y) for x, y in unit_square], "sep-2")
        other.add_sample(5.5, 0.5, 3.0)
        other.lift()

        path = tmp_path / "two.obj"
        stats = export_obj([lifted_square, other], str(path))

        assert stats.total_vertices == 16
        assert stats.total_faces == 20
        faces = [line for line in path.read_text().splitlines() if line.startswith("f ")]
        assert max(int(i) for line in faces for i in line.split()[1:]) == 16
        assert validate_obj_file(str(path)) == []

    def test_unlifted_skipped(self, lifted_square, unlifted_feature, tmp_path):
        path = tmp_path / "mixed.obj"
        stats = export_obj([unlifted_feature, lifted_square], str(path))

        assert stats.total_features == 1
        assert stats.skipped_features == 1
        assert "sep-empty" not in path.read_text()

    def test_no_groups(self, lifted_square, tmp_path):
        path = tmp_path / "flat.obj"
        export_obj([lifted_square], str(path), use_groups=False, comment="parcel 7")

        text = path.read_text()
        assert "\ng " not in text
        assert "# parcel 7\n" in text

    def test_creates_directory(self, lifted_square, tmp_path):
        path = tmp_path / "nested" / "dir" / "out.obj"
        export_obj([lifted_square], str(path))
        assert path.exists()


class TestValidateObjFile:
    """Tests for validate_obj_file."""

    def test_missing_file(self, tmp_path):
        errors = validate_obj_file(str(tmp_path / "missing.obj"))
        assert errors and "not found" in errors[0]

    def test_no_faces(self, tmp_path):
        path = tmp_path / "empty.obj"
        path.write_text("v 0 0 0\n")
        assert validate_obj_file(str(path)) == ["File has no faces"]

    def test_bad_faces(self, tmp_path):
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 4\nf 1 2 3 1\n")
        errors = validate_obj_file(str(path))

        assert any("out of range" in e for e in errors)
        assert any("not a triangle" in e for e in errors)
