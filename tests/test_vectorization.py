"""
Tests for binarization, cell patterns and the cell grid
"""
import pytest
import numpy as np

from conftest import make_rgba, make_mask


class TestImagePreprocessor:
    """Test the ink predicate"""

    def test_white_is_background(self):
        from src.ingestion.preprocessor import ImagePreprocessor

        mask = ImagePreprocessor().binarize(make_rgba(3, 2))
        assert mask.shape == (2, 3)
        assert mask.sum() == 0

    def test_any_non_white_is_ink(self):
        from src.ingestion.preprocessor import ImagePreprocessor

        rgba = make_rgba(4, 1)
        rgba[0, 0] = (0, 0, 0, 255)
        rgba[0, 1] = (254, 255, 255, 255)
        rgba[0, 2] = (255, 255, 255, 254)

        mask = ImagePreprocessor().binarize(rgba)
        assert mask.tolist() == [[1, 1, 1, 0]]

    def test_transparent_pixel_is_ink(self):
        """Fully transparent is not opaque white"""
        from src.ingestion.preprocessor import ImagePreprocessor

        rgba = make_rgba(1, 1)
        rgba[0, 0] = (255, 255, 255, 0)
        assert ImagePreprocessor().binarize(rgba)[0, 0] == 1

    def test_custom_background(self):
        from src.ingestion.preprocessor import ImagePreprocessor, PreprocessingConfig

        rgba = make_rgba(2, 1, ink=[(0, 0)], color=(10, 20, 30, 255))
        config = PreprocessingConfig(background=(10, 20, 30, 255))
        assert ImagePreprocessor(config).binarize(rgba).tolist() == [[0, 1]]

    def test_rejects_non_rgba(self):
        from src.ingestion.preprocessor import ImagePreprocessor

        with pytest.raises(ValueError, match="RGBA"):
            ImagePreprocessor().binarize(np.zeros((2, 2), dtype=np.uint8))

    def test_sample_out_of_bounds(self):
        from src.ingestion.preprocessor import ImagePreprocessor

        mask = np.ones((2, 2), dtype=np.uint8)
        assert ImagePreprocessor.sample(mask, 1, 1) == 1
        assert ImagePreprocessor.sample(mask, 2, 0) == 0
        assert ImagePreprocessor.sample(mask, 0, 2) == 0
        assert ImagePreprocessor.sample(mask, -1, 0) == 0


class TestCellPattern:
    """Test the 16 cell patterns"""

    def test_bitmask_layout(self):
        from src.vectorization.cells import CellPattern

        assert CellPattern.from_samples(1, 0, 0, 0) == CellPattern.I_L_T
        assert CellPattern.from_samples(0, 1, 0, 0) == CellPattern.I_R_T
        assert CellPattern.from_samples(0, 0, 1, 0) == CellPattern.I_L_B
        assert CellPattern.from_samples(0, 0, 0, 1) == CellPattern.I_R_B

    def test_named_patterns(self):
        from src.vectorization.cells import CellPattern

        expected = {
            CellPattern.L_T: (1, 1, 0, 0),
            CellPattern.L_B: (0, 0, 1, 1),
            CellPattern.L_L: (1, 0, 1, 0),
            CellPattern.L_R: (0, 1, 0, 1),
            CellPattern.C_R_B: (1, 1, 1, 0),
            CellPattern.C_L_B: (1, 1, 0, 1),
            CellPattern.C_L_T: (0, 1, 1, 1),
            CellPattern.C_R_T: (1, 0, 1, 1),
            CellPattern.D_L: (0, 1, 1, 0),
            CellPattern.D_R: (1, 0, 0, 1),
        }
        for pattern, samples in expected.items():
            assert pattern.samples == samples, pattern.name
            assert CellPattern.from_samples(*samples) is pattern

    def test_all_sixteen_values_distinct(self):
        from src.vectorization.cells import CellPattern

        assert sorted(int(p) for p in CellPattern) == list(range(16))

    def test_uniform(self):
        from src.vectorization.cells import CellPattern

        uniform = [p for p in CellPattern if p.is_uniform]
        assert uniform == [CellPattern.EMPTY, CellPattern.FULL]


class TestDirection:
    """Test headings and turns"""

    def test_deltas(self):
        from src.vectorization.cells import Direction

        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)
        assert Direction.LEFT.delta == (-1, 0)
        assert Direction.RIGHT.delta == (1, 0)
        assert Direction.NONE.delta == (0, 0)

    def test_turn_left_cycle(self):
        from src.vectorization.cells import Direction

        d = Direction.UP
        seen = []
        for _ in range(4):
            d = d.turn_left()
            seen.append(d)
        assert seen == [Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP]

    def test_turn_right_cycle(self):
        from src.vectorization.cells import Direction

        d = Direction.UP
        seen = []
        for _ in range(4):
            d = d.turn_right()
            seen.append(d)
        assert seen == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]

    def test_turns_from_none(self):
        from src.vectorization.cells import Direction

        assert Direction.NONE.turn_left() == Direction.LEFT
        assert Direction.NONE.turn_right() == Direction.RIGHT


class TestRotate:
    """Test rotation into the walker's frame"""

    def test_up_and_none_are_identity(self):
        from src.vectorization.cells import CellPattern, Direction, rotate

        for p in CellPattern:
            assert rotate(p, Direction.UP) is p
            assert rotate(p, Direction.NONE) is p

    def test_left_rotates_clockwise(self):
        from src.vectorization.cells import CellPattern, Direction, rotate

        # (tl, tr, bl, br) -> (bl, tl, br, tr)
        assert rotate(CellPattern.L_T, Direction.LEFT) == CellPattern.L_R
        assert rotate(CellPattern.L_B, Direction.LEFT) == CellPattern.L_L
        assert rotate(CellPattern.I_L_T, Direction.LEFT) == CellPattern.I_R_T

    def test_right_rotates_counter_clockwise(self):
        from src.vectorization.cells import CellPattern, Direction, rotate

        # (tl, tr, bl, br) -> (tr, br, tl, bl)
        assert rotate(CellPattern.L_T, Direction.RIGHT) == CellPattern.L_L
        assert rotate(CellPattern.I_L_T, Direction.RIGHT) == CellPattern.I_L_B
        assert rotate(CellPattern.D_R, Direction.RIGHT) == CellPattern.D_L

    def test_down_rotates_half_turn(self):
        from src.vectorization.cells import CellPattern, Direction, rotate

        # (tl, tr, bl, br) -> (br, bl, tr, tl)
        assert rotate(CellPattern.L_R, Direction.DOWN) == CellPattern.L_L
        assert rotate(CellPattern.I_R_T, Direction.DOWN) == CellPattern.I_L_B
        assert rotate(CellPattern.D_R, Direction.DOWN) == CellPattern.D_R

    def test_four_rotations_are_identity(self):
        from src.vectorization.cells import CellPattern, Direction, rotate

        for p in CellPattern:
            q = p
            for _ in range(4):
                q = rotate(q, Direction.LEFT)
            assert q is p
            assert rotate(rotate(p, Direction.LEFT), Direction.RIGHT) is p

    def test_rotation_preserves_ink_count(self):
        from src.vectorization.cells import CellPattern, Direction, rotate

        for p in CellPattern:
            for d in Direction:
                assert sum(rotate(p, d).samples) == sum(p.samples)


class TestCellGrid:
    """Test grid construction and lookups"""

    def test_padded_shape(self):
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(make_mask(5, 3))
        assert grid.shape == (5, 7)
        assert grid.width == 7
        assert grid.height == 5

    def test_cell_windows(self):
        from src.vectorization.cells import CellPattern
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(make_mask(3, 3, ink=[(1, 1)]))

        assert grid.pattern_at(1, 1) == CellPattern.I_R_B
        assert grid.pattern_at(2, 1) == CellPattern.I_L_B
        assert grid.pattern_at(1, 2) == CellPattern.I_R_T
        assert grid.pattern_at(2, 2) == CellPattern.I_L_T
        assert grid.pattern_at(3, 3) == CellPattern.EMPTY

    def test_padding_ring_is_empty(self):
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(np.ones((3, 4), dtype=np.uint8))
        keys = grid.keys
        assert not keys[0, :].any()
        assert not keys[-1, :].any()
        assert not keys[:, 0].any()
        assert not keys[:, -1].any()

    def test_edge_samples_read_background(self):
        """Last image column and row see out-of-bounds samples as 0"""
        from src.vectorization.cells import CellPattern
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(np.ones((3, 4), dtype=np.uint8))
        assert grid.pattern_at(1, 1) == CellPattern.FULL
        assert grid.pattern_at(4, 1) == CellPattern.L_L
        assert grid.pattern_at(1, 3) == CellPattern.L_T
        assert grid.pattern_at(4, 3) == CellPattern.I_L_T

    def test_grid_is_read_only(self):
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(make_mask(2, 2, ink=[(0, 0)]))
        with pytest.raises(ValueError):
            grid.keys[1, 1] = 0

    def test_pattern_at_out_of_range(self):
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(make_mask(2, 2))
        assert not grid.contains(-1, 0)
        assert not grid.contains(4, 0)
        with pytest.raises(IndexError):
            grid.pattern_at(4, 0)

    def test_find_start_row_major(self):
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(make_mask(6, 6, ink=[(4, 2), (1, 3)]))
        # Pixel (4, 2) is first reached by the window at (3, 1) -> cell (4, 2)
        assert grid.find_start() == (4, 2)

    def test_find_start_none(self):
        from src.vectorization.grid import CellGrid

        assert CellGrid.from_mask(make_mask(4, 4)).find_start() is None

    def test_ink_cells(self):
        from src.vectorization.grid import CellGrid

        grid = CellGrid.from_mask(make_mask(3, 3, ink=[(1, 1)]))
        ink = grid.ink_cells()
        assert ink.shape == (5, 5)
        assert ink.sum() == 4
        assert ink[1:3, 1:3].all()
