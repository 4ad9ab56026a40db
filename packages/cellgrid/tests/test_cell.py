"""
Test suite for Cell.

Tests cover:
- Identity and equality by map and location
- Permeability attribute and its default
- Neighbor enumeration with and without diagonals
- Axis exclusion
- Accessibility filtering modes
- canBeAccessedFrom rules and cross-map errors
"""

import pytest
from cellgrid import PERMEABILITY, AccessMode, Axis, Cell, GridMap, Location


def full_grid(width, height, depth):
    grid = GridMap(width, height, depth)
    grid.fill()
    return grid


class TestCellIdentity:
    """Test cell identity and basic properties."""

    def test_location_and_grid(self):
        grid = GridMap(2, 2, 2)
        cell = grid.create_cell(Location(1, 0, 1))
        assert cell.location == Location(1, 0, 1)
        assert cell.grid is grid

    def test_equal_by_grid_and_location(self):
        grid = GridMap(2, 2, 2)
        assert Cell(Location(0, 0, 0), grid) == Cell(Location(0, 0, 0), grid)
        assert hash(Cell(Location(0, 0, 0), grid)) == hash(Cell(Location(0, 0, 0), grid))

    def test_different_grids_not_equal(self):
        assert Cell(Location(0, 0, 0), GridMap(1, 1, 1)) != Cell(Location(0, 0, 0), GridMap(1, 1, 1))

    def test_layer(self):
        grid = full_grid(2, 3, 2)
        cell = grid.cell_at(Location(1, 2, 0))
        assert cell.layer.y == 2
        assert cell in cell.layer.cells()


class TestCellPermeability:
    """Test the permeability attribute."""

    def test_default_permeable(self):
        cell = GridMap(1, 1, 1).create_cell(Location(0, 0, 0))
        assert cell.permeable is True

    def test_set_impermeable(self):
        cell = GridMap(1, 1, 1).create_cell(Location(0, 0, 0))
        cell.permeable = False
        assert cell.attributes.get(PERMEABILITY) is False
        assert cell.permeable is False

    def test_attribute_drives_property(self):
        cell = GridMap(1, 1, 1).create_cell(Location(0, 0, 0), {PERMEABILITY: False})
        assert cell.permeable is False


class TestCellNeighbors:
    """Test neighbor enumeration."""

    def test_face_neighbors_of_center(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        neighbors = center.neighbors(AccessMode.ALL)
        assert len(neighbors) == 6
        assert all(center.location.manhattan(n.location) == 1 for n in neighbors)

    def test_all_26_with_diagonals(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        neighbors = center.neighbors(AccessMode.ALL, include_diagonals=True)
        assert len(neighbors) == 26
        assert center not in neighbors

    def test_diagonal_offsets_stay_within_one(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        for n in center.neighbors(AccessMode.ALL, include_diagonals=True):
            delta = n.location - center.location
            assert {delta.x, delta.y, delta.z} <= {-1, 0, 1}
            assert center.location.manhattan(n.location) > 0

    def test_corner_skips_out_of_bounds(self):
        grid = full_grid(3, 3, 3)
        corner = grid.cell_at(Location(0, 0, 0))
        assert len(corner.neighbors(AccessMode.ALL)) == 3
        assert len(corner.neighbors(AccessMode.ALL, include_diagonals=True)) == 7

    def test_absent_slots_skipped(self):
        grid = full_grid(3, 1, 1)
        grid.remove_cell_at(Location(2, 0, 0))
        middle = grid.cell_at(Location(1, 0, 0))
        assert [n.location for n in middle.neighbors(AccessMode.ALL)] == [Location(0, 0, 0)]

    def test_exclude_y_axis(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        neighbors = center.neighbors(AccessMode.ALL, exclude_axes=[Axis.Y])
        assert len(neighbors) == 4
        assert all(n.location.y == 1 for n in neighbors)

    def test_exclude_y_axis_with_diagonals(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        neighbors = center.neighbors(AccessMode.ALL, include_diagonals=True, exclude_axes=[Axis.Y])
        assert len(neighbors) == 8
        assert all(n.location.y == 1 for n in neighbors)

    def test_exclude_two_axes(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        neighbors = center.neighbors(AccessMode.ALL, include_diagonals=True, exclude_axes=(Axis.X, Axis.Z))
        assert {n.location for n in neighbors} == {Location(1, 0, 1), Location(1, 2, 1)}

    def test_exclude_all_axes_returns_empty(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        assert center.neighbors(AccessMode.ALL, True, (Axis.X, Axis.Y, Axis.Z)) == []


class TestCellAccessModes:
    """Test ACCESSIBLE / INACCESSIBLE / ALL filtering."""

    def test_accessible_skips_impermeable(self):
        grid = full_grid(3, 1, 1)
        grid.cell_at(Location(2, 0, 0)).permeable = False
        middle = grid.cell_at(Location(1, 0, 0))
        assert [n.location for n in middle.neighbors()] == [Location(0, 0, 0)]

    def test_inaccessible_is_complement(self):
        grid = full_grid(3, 1, 1)
        grid.cell_at(Location(2, 0, 0)).permeable = False
        middle = grid.cell_at(Location(1, 0, 0))
        assert [n.location for n in middle.neighbors(AccessMode.INACCESSIBLE)] == [Location(2, 0, 0)]

    def test_impermeable_origin_has_no_accessible_neighbors(self):
        grid = full_grid(3, 1, 1)
        middle = grid.cell_at(Location(1, 0, 0))
        middle.permeable = False
        assert middle.neighbors() == []
        assert len(middle.neighbors(AccessMode.INACCESSIBLE)) == 2

    def test_diagonals_never_accessible(self):
        grid = full_grid(3, 3, 3)
        center = grid.cell_at(Location(1, 1, 1))
        accessible = center.neighbors(AccessMode.ACCESSIBLE, include_diagonals=True)
        assert len(accessible) == 6
        inaccessible = center.neighbors(AccessMode.INACCESSIBLE, include_diagonals=True)
        assert len(inaccessible) == 20

    def test_modes_partition_all(self):
        grid = full_grid(3, 3, 1)
        grid.cell_at(Location(0, 1, 0)).permeable = False
        center = grid.cell_at(Location(1, 1, 0))
        every = {n.location for n in center.neighbors(AccessMode.ALL, True)}
        accessible = {n.location for n in center.neighbors(AccessMode.ACCESSIBLE, True)}
        inaccessible = {n.location for n in center.neighbors(AccessMode.INACCESSIBLE, True)}
        assert accessible | inaccessible == every
        assert not accessible & inaccessible


class TestCanBeAccessedFrom:
    """Test the accessibility predicate."""

    def test_adjacent_permeable(self):
        grid = full_grid(2, 1, 1)
        a, b = grid.cell_at(Location(0, 0, 0)), grid.cell_at(Location(1, 0, 0))
        assert a.can_be_accessed_from(b)
        assert b.can_be_accessed_from(a)

    def test_target_impermeable(self):
        grid = full_grid(2, 1, 1)
        a, b = grid.cell_at(Location(0, 0, 0)), grid.cell_at(Location(1, 0, 0))
        b.permeable = False
        assert not b.can_be_accessed_from(a)

    def test_source_impermeable(self):
        grid = full_grid(2, 1, 1)
        a, b = grid.cell_at(Location(0, 0, 0)), grid.cell_at(Location(1, 0, 0))
        a.permeable = False
        assert not b.can_be_accessed_from(a)

    def test_diagonal_not_accessible(self):
        grid = full_grid(2, 2, 1)
        a, b = grid.cell_at(Location(0, 0, 0)), grid.cell_at(Location(1, 1, 0))
        assert not b.can_be_accessed_from(a)

    def test_two_apart_not_accessible(self):
        grid = full_grid(3, 1, 1)
        a, c = grid.cell_at(Location(0, 0, 0)), grid.cell_at(Location(2, 0, 0))
        assert not c.can_be_accessed_from(a)

    def test_self_not_accessible(self):
        grid = full_grid(1, 1, 1)
        a = grid.cell_at(Location(0, 0, 0))
        assert not a.can_be_accessed_from(a)

    def test_cross_map_raises(self):
        a = full_grid(2, 1, 1).cell_at(Location(0, 0, 0))
        b = full_grid(2, 1, 1).cell_at(Location(1, 0, 0))
        with pytest.raises(ValueError, match="same map"):
            b.can_be_accessed_from(a)

    def test_iff_permeable_and_unit_distance(self):
        grid = full_grid(3, 3, 1)
        grid.cell_at(Location(1, 1, 0)).permeable = False
        cells = grid.cells()
        for a in cells:
            for b in cells:
                expected = (
                    a.permeable
                    and b.permeable
                    and a.location.distance_squared(b.location) == 1
                )
                assert b.can_be_accessed_from(a) == expected
