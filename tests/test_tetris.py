import math

import pytest

from gokustudio.tetris import (
    BLOCK_SIZE,
    Block,
    RigidBody,
    Shape2D,
    create_tetromino,
)

RED = (255, 0, 0)


@pytest.mark.parametrize("letter", list("IOTLJSZ"))
def test_shapes_have_four_distinct_grid_blocks(letter):
    shape = create_tetromino(60, 0, letter, RED, 1.0)
    positions = {(b.x, b.y) for b in shape.blocks}
    assert len(shape.blocks) == 4
    assert len(positions) == 4
    assert all((b.x - 60) % BLOCK_SIZE == 0 and b.y % BLOCK_SIZE == 0 for b in shape.blocks)
    assert all(b.width == BLOCK_SIZE and b.height == BLOCK_SIZE for b in shape.blocks)


def test_unknown_shape_is_empty():
    assert create_tetromino(0, 0, "X", RED, 1.0).blocks == []


def test_i_shape_is_a_horizontal_line():
    shape = create_tetromino(0, 0, "I", RED, 1.0)
    assert {b.y for b in shape.blocks} == {0}
    assert shape.blocks[0] == Block(0, 0)


def test_rigid_body_without_force_stays_still():
    body = RigidBody(1.0)
    body.update(0.5)
    assert body.velocity == (0.0, 0.0)


def test_rigid_body_moves_at_fixed_speed():
    body = RigidBody(2.0)
    body.apply_force(3.0, 4.0)
    body.update(0.1)
    assert math.hypot(*body.velocity) == pytest.approx(body.speed)
    body.reset_acceleration()
    assert body.acceleration == (0.0, 0.0)


def test_apply_force_divides_by_mass():
    body = RigidBody(2.0)
    body.apply_force(4.0, 8.0)
    assert body.acceleration == pytest.approx((2.0, 4.0))


def test_rotate_four_times_is_identity():
    shape = create_tetromino(100, 100, "L", RED, 1.0)
    original = list(shape.blocks)
    pivot = shape.blocks[1]
    for _ in range(4):
        shape.rotate()
        assert shape.blocks[1] == pivot
    assert shape.blocks == original


def test_rotate_empty_shape_raises():
    with pytest.raises(ValueError):
        create_tetromino(0, 0, "X", RED, 1.0).rotate()


def test_translate_round_trip():
    shape = create_tetromino(40, 40, "S", RED, 1.0)
    original = list(shape.blocks)
    shape.translate(7, -3)
    assert shape.blocks != original
    shape.translate(-7, 3)
    assert shape.blocks == original


def test_collisions_between_shapes():
    a = create_tetromino(100, 100, "T", RED, 1.0)
    b = create_tetromino(100, 100, "T", RED, 1.0)
    far = create_tetromino(400, 400, "T", RED, 1.0)
    assert a.collides_with(b)
    assert not a.collides_with(far)
    assert a.collision_with_placed_tetrominos([far, b])
    assert not a.collision_with_placed_tetrominos([far])


def test_is_valid_position_checks_screen_edges():
    shape = create_tetromino(0, 0, "O", RED, 1.0)
    assert shape.is_valid_position(0, 0, 800, 600)
    assert not shape.is_valid_position(-1, 0, 800, 600)
    assert not shape.is_valid_position(0, -1, 800, 600)
    assert not shape.is_valid_position(0, 0, BLOCK_SIZE, 600)


def test_update_moves_freely_in_open_space():
    shape = create_tetromino(300, 100, "T", RED, 1.0)
    expected = shape.copy()
    shape.rigid_body.apply_force(0.0, 9.8)
    collided = shape.update(0.016, 800, 600, [])
    expected.translate(0, int(shape.rigid_body.velocity[1]))
    assert collided is False
    assert shape.blocks == expected.blocks


def test_update_stops_at_floor():
    shape = create_tetromino(300, 600 - 2 * BLOCK_SIZE, "T", RED, 1.0)
    shape.rigid_body.apply_force(0.0, 9.8)
    assert shape.update(0.016, 800, 600, []) is True
    assert shape.rigid_body.velocity[1] == 0.0
    assert shape.rigid_body.acceleration == (0.0, 0.0)


def test_update_reverts_on_placed_collision():
    shape = create_tetromino(300, 100, "O", RED, 1.0)
    original = list(shape.blocks)
    placed = create_tetromino(300, 100, "O", RED, 1.0)
    placed.translate(0, 10)
    shape.rigid_body.apply_force(0.0, 9.8)
    assert shape.update(0.016, 800, 600, [placed]) is True
    assert shape.blocks == original


def test_copy_is_independent():
    shape = create_tetromino(100, 100, "Z", RED, 1.0)
    clone = shape.copy()
    clone.translate(20, 0)
    clone.rigid_body.apply_force(1.0, 0.0)
    assert shape.blocks != clone.blocks
    assert shape.rigid_body.acceleration == (0.0, 0.0)


def test_shape_default_body():
    shape = Shape2D([Block(0, 0)], RED)
    assert shape.rigid_body.mass == 1.0