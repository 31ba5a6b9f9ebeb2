"""End-to-end tests for ellipse tessellation on the ellipsoid.

Scenario values follow the reference ellipse: center at lon -75.59777,
lat 40.03883 on WGS84, semi-axes 500 km / 300 km.
"""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from ellipse_geometry import (
    InvalidArgumentError,
    EllipseOptions,
    PrimitiveType,
    VertexFormat,
    compute_ellipse_geometry,
    ellipse_geometry,
)
from ellipse_geometry.core.models.ellipsoid import Ellipsoid, WGS84


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def reference_mesh(reference_center):
    """Default-granularity mesh of the reference ellipse."""
    return ellipse_geometry(
        center=reference_center,
        semi_major_axis=500000.0,
        semi_minor_axis=300000.0,
    )


# ---------------------------------------------------------------------------
# Concrete scenario
# ---------------------------------------------------------------------------

class TestReferenceScenario:
    """The reference ellipse at default granularity."""

    def test_realized_rows(self, reference_mesh):
        # 80 steps are planned; the theta > 0 guard stops the sweep after 54
        assert reference_mesh.num_rows == 54

    def test_vertex_count(self, reference_mesh):
        n = reference_mesh.num_rows
        assert reference_mesh.vertex_count == 2 * n * (n + 1) == 5940
        assert len(reference_mesh.positions) == 3 * 5940

    def test_triangle_count(self, reference_mesh):
        n = reference_mesh.num_rows
        assert reference_mesh.triangle_count == 4 * n * n - 2 == 11662

    def test_bounding_sphere(self, reference_mesh, reference_center):
        assert reference_mesh.bounding_sphere.radius == 500000.0
        np.testing.assert_array_equal(reference_mesh.bounding_sphere.center, reference_center)

    def test_single_triangle_index_list(self, reference_mesh):
        assert len(reference_mesh.index_lists) == 1
        assert reference_mesh.index_lists[0].primitive_type is PrimitiveType.TRIANGLES

    def test_default_model_matrix_and_pick_data(self, reference_mesh):
        np.testing.assert_array_equal(reference_mesh.model_matrix, np.identity(4))
        assert reference_mesh.pick_data is None

    def test_only_position_attribute_by_default(self, reference_mesh):
        assert list(reference_mesh.attributes) == ["position"]
        assert reference_mesh.attributes["position"].components_per_attribute == 3


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

class TestMeshInvariants:
    """Properties that hold for every valid input."""

    @pytest.mark.parametrize("bearing, granularity", [(0.0, 0.02), (1.0, 0.05), (-2.5, 0.3), (0.4, 2.0)])
    def test_index_bounds_and_distinct_triangles(self, reference_center, bearing, granularity):
        mesh = ellipse_geometry(
            center=reference_center,
            semi_major_axis=200000.0,
            semi_minor_axis=80000.0,
            bearing=bearing,
            granularity=granularity,
        )

        assert len(mesh.indices) % 3 == 0
        assert mesh.indices.min() >= 0
        assert mesh.indices.max() < len(mesh.positions) // 3

        tri = mesh.indices.reshape(-1, 3)
        assert np.all((tri[:, 0] != tri[:, 1]) & (tri[:, 1] != tri[:, 2]) & (tri[:, 0] != tri[:, 2]))

    def test_infinite_granularity_gives_single_row(self, reference_center):
        mesh = ellipse_geometry(
            center=reference_center,
            semi_major_axis=500000.0,
            semi_minor_axis=300000.0,
            granularity=math.inf,
        )

        assert mesh.num_rows == 1
        assert mesh.vertex_count == 4
        assert mesh.indices.tolist() == [0, 2, 1, 2, 3, 1]
        assert np.all(np.isfinite(mesh.positions))

    def test_positions_lie_on_surface(self, reference_mesh):
        points = reference_mesh.position_array()
        residual = np.sum((points / WGS84.radii) ** 2, axis=1) - 1.0
        assert np.max(np.abs(residual)) < 1e-10

    @pytest.mark.parametrize("height", [1000.0, -250.0])
    def test_positions_offset_by_height(self, reference_center, height):
        mesh = ellipse_geometry(
            center=reference_center,
            semi_major_axis=500000.0,
            semi_minor_axis=300000.0,
            height=height,
            granularity=0.1,
        )
        points = mesh.position_array()
        foot = WGS84.scale_to_geodetic_surface(points)

        np.testing.assert_allclose(
            points, foot + height * WGS84.geodetic_surface_normal(foot), atol=1e-3
        )
        np.testing.assert_allclose(np.linalg.norm(points - foot, axis=1), abs(height), rtol=1e-6)

    def test_positions_stay_near_center(self, reference_mesh, reference_center):
        distances = np.linalg.norm(reference_mesh.position_array() - reference_center, axis=1)
        # The apex sits one semi-major axis (arc length) from the center
        assert distances.max() == pytest.approx(500000.0, rel=1e-2)

    def test_circle_boundary_is_round(self, equator_center):
        """With equal axes the outermost points are all equally far from the center."""
        mesh = ellipse_geometry(
            center=equator_center,
            semi_major_axis=100000.0,
            semi_minor_axis=100000.0,
            ellipsoid=Ellipsoid(6378137.0, 6378137.0, 6378137.0),
            granularity=0.1,
        )
        points = mesh.position_array()
        n = mesh.num_rows
        # First point of every positive row is a boundary sample
        boundary = points[[i * (i + 1) for i in range(n)]]
        distances = np.linalg.norm(boundary - equator_center, axis=1)
        np.testing.assert_allclose(distances, distances[0], rtol=1e-9)


# ---------------------------------------------------------------------------
# Axis normalization
# ---------------------------------------------------------------------------

class TestAxisNormalization:
    """Swapped semi-axes produce the same mesh."""

    def test_swapped_axes_identical_mesh(self, reference_center):
        canonical = ellipse_geometry(
            center=reference_center, semi_major_axis=500000.0, semi_minor_axis=300000.0, granularity=0.05
        )
        swapped = ellipse_geometry(
            center=reference_center, semi_major_axis=300000.0, semi_minor_axis=500000.0, granularity=0.05
        )

        np.testing.assert_allclose(swapped.positions, canonical.positions)
        np.testing.assert_array_equal(swapped.indices, canonical.indices)
        assert swapped.bounding_sphere.radius == 500000.0


# ---------------------------------------------------------------------------
# Vertex format and passthrough
# ---------------------------------------------------------------------------

class TestVertexFormat:
    """Attribute selection and passthrough fields."""

    def test_no_position_still_emits_indices(self, reference_center):
        mesh = ellipse_geometry(
            center=reference_center,
            semi_major_axis=500000.0,
            semi_minor_axis=300000.0,
            vertex_format=VertexFormat(),
        )

        assert "position" not in mesh.attributes
        assert len(mesh.positions) == 0
        assert mesh.vertex_count == 0
        assert mesh.triangle_count == 4 * mesh.num_rows ** 2 - 2

    def test_all_attributes(self, reference_center):
        mesh = ellipse_geometry(
            center=reference_center,
            semi_major_axis=500000.0,
            semi_minor_axis=300000.0,
            granularity=0.1,
            vertex_format=VertexFormat.ALL,
        )

        assert set(mesh.attributes) == {"position", "normal", "tangent", "binormal"}
        count = mesh.vertex_count
        for attribute in mesh.attributes.values():
            assert attribute.vertex_count == count

        normals = mesh.attributes["normal"].values.reshape(-1, 3)
        tangents = mesh.attributes["tangent"].values.reshape(-1, 3)
        binormals = mesh.attributes["binormal"].values.reshape(-1, 3)

        np.testing.assert_allclose(normals, WGS84.geodetic_surface_normal(mesh.position_array()))
        np.testing.assert_allclose(np.linalg.norm(tangents, axis=1), 1.0)
        np.testing.assert_allclose(np.sum(normals * tangents, axis=1), 0.0, atol=1e-12)
        np.testing.assert_allclose(binormals, np.cross(normals, tangents))

    def test_attributes_do_not_change_positions(self, reference_center):
        kwargs = dict(center=reference_center, semi_major_axis=500000.0, semi_minor_axis=300000.0, granularity=0.1)
        plain = ellipse_geometry(**kwargs)
        full = ellipse_geometry(vertex_format=VertexFormat.ALL, **kwargs)
        np.testing.assert_array_equal(plain.positions, full.positions)

    def test_model_matrix_and_pick_data_passthrough(self, reference_center):
        model_matrix = np.identity(4)
        model_matrix[:3, 3] = [10.0, 20.0, 30.0]
        pick = {"id": "ellipse-7"}

        mesh = compute_ellipse_geometry(EllipseOptions(
            center=reference_center,
            semi_major_axis=500000.0,
            semi_minor_axis=300000.0,
            granularity=0.2,
            model_matrix=model_matrix,
            pick_data=pick,
        ))

        np.testing.assert_array_equal(mesh.model_matrix, model_matrix)
        assert mesh.pick_data is pick


# ---------------------------------------------------------------------------
# Failures and logging
# ---------------------------------------------------------------------------

class TestFailures:
    """Errors raised by the pipeline."""

    def test_center_on_polar_axis(self):
        with pytest.raises(InvalidArgumentError):
            ellipse_geometry(
                center=WGS84.cartesian_from_degrees(0.0, 90.0) * np.array([0.0, 0.0, 1.0]),
                semi_major_axis=1000.0,
                semi_minor_axis=500.0,
            )

    def test_missing_center(self):
        with pytest.raises(InvalidArgumentError, match="center"):
            ellipse_geometry(semi_major_axis=1000.0, semi_minor_axis=500.0)


class TestLogging:
    """The pipeline reports its sizes at DEBUG level."""

    def test_debug_summary(self, reference_center, caplog):
        caplog.set_level(logging.DEBUG, logger="ellipse_geometry")

        ellipse_geometry(
            center=reference_center,
            semi_major_axis=500000.0,
            semi_minor_axis=300000.0,
            bearing=math.radians(60.0),
        )

        messages = [record.getMessage() for record in caplog.records]
        assert any("54 rows, 5940 vertices, 11662 triangles" in m for m in messages)
        assert any("planned 80 steps, realized 54 rows" in m for m in messages)
