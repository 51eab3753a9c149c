"""Unit tests for the Glyph handle and mesh generation."""

import gc

import pytest

from ttfmesh.core import Font, Mesh2D, Mesh3D, MeshFeatures
from ttfmesh.domain import ErrorKind, Quality
from ttfmesh.exceptions import GlyphMeshError, StaleHandleError


class TestGlyphRecord:
    """Tests for glyph metadata read from the font's glyph table."""

    def test_metadata(self, font) -> None:
        glyph = font.glyph_by_char("A")
        assert glyph.font is font
        assert glyph.symbol == ord("A")
        assert glyph.contour_count == 2
        assert glyph.point_count == 8
        assert glyph.has_outline
        assert not glyph.is_composite
        assert glyph.advance == pytest.approx(0.6)
        assert glyph.left_bearing == pytest.approx(0.05)
        assert glyph.right_bearing == pytest.approx(0.05)
        assert glyph.x_bounds == pytest.approx((0.05, 0.55))
        assert glyph.y_bounds == pytest.approx((-0.01, 0.7))

    def test_composite_flag(self, font) -> None:
        assert font.glyph_by_char("B").is_composite

    def test_space_has_no_outline(self, font) -> None:
        space = font.glyph_by_char(" ")
        assert not space.has_outline
        assert space.contour_count == 0

    def test_repr(self, font) -> None:
        assert repr(font.glyph_by_char("€")) == "<Glyph #4 symbol=0x20ac>"


class TestGlyphLifetime:
    """Tests for glyphs borrowed from a font."""

    def test_stale_after_font_close(self, engine, font_file) -> None:
        font = Font.from_path(font_file, engine=engine)
        glyph = font.glyph_by_char("A")
        font.close()

        with pytest.raises(StaleHandleError, match="Font was released"):
            _ = glyph.symbol
        with pytest.raises(StaleHandleError):
            glyph.to_2d_mesh()
        with pytest.raises(StaleHandleError):
            glyph.to_3d_mesh()
        assert repr(glyph) == "<Glyph #1 stale>"
        assert engine.mesh_calls == []

    def test_glyph_keeps_font_alive(self, engine, font_file) -> None:
        """A glyph whose font went out of scope is still usable."""
        glyph = Font.from_path(font_file, engine=engine).glyph_by_char("B")
        gc.collect()

        assert engine.release_count("free") == 0
        assert glyph.contour_count == 3

        del glyph
        gc.collect()
        assert engine.release_count("free") == 1


class TestToMesh:
    """Tests for to_2d_mesh / to_3d_mesh."""

    def test_2d_defaults(self, engine, font) -> None:
        with font.glyph_by_char("A").to_2d_mesh() as mesh:
            assert isinstance(mesh, Mesh2D)
        assert engine.mesh_calls[-1] == {"dims": 2, "index": 1, "quality": 20, "features": 0}

    def test_3d_defaults(self, engine, font) -> None:
        with font.glyph_by_char("A").to_3d_mesh() as mesh:
            assert isinstance(mesh, Mesh3D)
        call = engine.mesh_calls[-1]
        assert call["dims"] == 3
        assert call["quality"] == 20
        assert call["features"] == 0
        assert call["depth"] == pytest.approx(0.5)

    @pytest.mark.parametrize(
        ("quality", "numeric"),
        [(Quality.low(), 10), (Quality.high(), 50), (Quality.custom(255), 255)],
    )
    def test_quality_passed_through(self, engine, font, quality: Quality, numeric: int) -> None:
        font.glyph_by_char("€").to_2d_mesh(quality).close()
        assert engine.mesh_calls[-1]["quality"] == numeric

    def test_depth_and_features(self, engine, font) -> None:
        glyph = font.glyph_by_char("€")
        glyph.to_3d_mesh(Quality.low(), depth=1.5, features=MeshFeatures.IGNORE_ERRORS).close()
        call = engine.mesh_calls[-1]
        assert call["depth"] == pytest.approx(1.5)
        assert call["features"] == 1

    def test_no_outline(self, font) -> None:
        space = font.glyph_by_char(" ")
        with pytest.raises(GlyphMeshError) as exc_info:
            space.to_2d_mesh()
        assert exc_info.value.glyph_index == 3
        assert exc_info.value.reason.kind is ErrorKind.NO_OUTLINE
        assert exc_info.value.reason.code == 10

        with pytest.raises(GlyphMeshError):
            space.to_3d_mesh()

    def test_mesh_outlives_font(self, engine, font_file) -> None:
        """Meshes own their buffers and stay readable after the font is freed."""
        with Font.from_path(font_file, engine=engine) as font:
            mesh = font.glyph_by_char("A").to_3d_mesh(Quality.low())
        assert font.closed

        assert mesh.vertex_count == 12
        assert len(list(mesh.iter_vertices())) == 12
        mesh.close()
        assert engine.release_count("free") == 1
        assert engine.release_count("free_mesh_3d") == 1

    def test_repeated_conversion(self, engine, font) -> None:
        """Converting the same glyph again yields the same mesh every time."""
        glyph = font.glyph_by_char("B")
        meshes = [glyph.to_2d_mesh() for _ in range(3)]
        counts = {(mesh.vertex_count, mesh.face_count) for mesh in meshes}
        for mesh in meshes:
            mesh.close()

        assert len(counts) == 1
        assert counts.pop()[0] > 0
        assert engine.release_count("free_mesh_2d") == 3

    def test_repeated_3d_conversion(self, engine, font) -> None:
        glyph = font.glyph_by_char("B")
        meshes = [glyph.to_3d_mesh() for _ in range(3)]
        counts = {(mesh.vertex_count, mesh.normal_count, mesh.face_count) for mesh in meshes}
        for mesh in meshes:
            mesh.close()

        assert len(counts) == 1
        assert counts.pop()[0] > 0
        assert engine.release_count("free_mesh_3d") == 3
