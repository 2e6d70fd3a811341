import pytest

from monster_snake.constants import Color
from monster_snake.entity import EntityKind
from monster_snake.food import AppleEntity, OrangeEntity
from monster_snake.monster import MonsterEntity
from monster_snake.snake import SnakeEntity
from monster_snake.utils import Direction, compass, translate
from monster_snake.world import World


def test_snake_starts_heading_right() -> None:
    snake = SnakeEntity((5, 5), 3, (20, 20))
    assert snake.locate() == [(5, 5), (4, 5), (3, 5)]
    assert snake.direction is Direction.RIGHT
    assert snake.is_kind(EntityKind.SNAKE)
    assert not snake.is_kind(EntityKind.MONSTER)


def test_snake_requires_a_segment() -> None:
    with pytest.raises(ValueError):
        SnakeEntity((5, 5), 0, (20, 20))


def test_snake_moves_and_wraps() -> None:
    world = World((6, 6))
    snake = SnakeEntity((5, 2), 2, world.dimensions)
    snake.update(world)
    assert snake.locate() == [(0, 2), (5, 2)]


def test_snake_grows_one_segment_on_next_update() -> None:
    world = World((20, 20))
    snake = SnakeEntity((5, 5), 3, world.dimensions)
    snake.grow()
    assert snake.length == 3

    snake.update(world)
    assert snake.length == 4
    assert snake.locate() == [(6, 5), (5, 5), (4, 5), (3, 5)]

    snake.update(world)
    assert snake.length == 4


def test_snake_grows_once_per_food() -> None:
    world = World((20, 20))
    snake = SnakeEntity((5, 5), 1, world.dimensions)
    snake.grow()
    snake.grow()
    for _ in range(3):
        snake.update(world)
    assert snake.length == 3


def test_snake_only_accepts_perpendicular_turns() -> None:
    world = World((20, 20))
    snake = SnakeEntity((5, 5), 3, world.dimensions)
    snake.handle_key(Direction.RIGHT)
    assert snake.direction is Direction.RIGHT
    snake.handle_key(Direction.LEFT)
    assert snake.direction is Direction.RIGHT
    snake.handle_key(Direction.UP)
    assert snake.direction is Direction.UP
    snake.handle_key(Direction.DOWN)
    assert snake.direction is Direction.UP
    snake.handle_key(Direction.LEFT)
    assert snake.direction is Direction.LEFT


def test_last_key_before_update_wins() -> None:
    world = World((20, 20))
    snake = SnakeEntity((5, 5), 3, world.dimensions)
    snake.handle_key(Direction.UP)
    snake.handle_key(Direction.LEFT)
    snake.update(world)
    assert snake.direction is Direction.LEFT
    assert snake.head == (4, 5)


def test_food_expires_exactly_at_zero() -> None:
    world = World((20, 20))
    apple = AppleEntity((3, 3), 3)
    world.add(apple)
    world.update()
    world.update()
    assert world.has(EntityKind.APPLE)
    assert apple.lifetime == 1
    world.update()
    assert not world.has(EntityKind.APPLE)


def test_food_requires_positive_lifetime() -> None:
    with pytest.raises(ValueError):
        OrangeEntity((1, 1), 0)


def test_food_colors() -> None:
    assert AppleEntity((0, 0), 1).color is Color.RED
    assert OrangeEntity((0, 0), 1).color is Color.ORANGE
    assert OrangeEntity((0, 0), 1).is_kind(EntityKind.ORANGE)


def test_monster_cluster_shape() -> None:
    monster = MonsterEntity((10, 10), 2, (20, 20))
    assert monster.locate() == [(10, 10), (11, 11), (9, 9), (9, 11), (11, 9)]


def test_monster_requires_positive_interval() -> None:
    with pytest.raises(ValueError):
        MonsterEntity((10, 10), 0, (20, 20))


def test_monster_moves_only_every_interval() -> None:
    world = World((40, 40))
    monster = MonsterEntity((10, 10), 2, world.dimensions)
    world.add(monster)
    world.add(SnakeEntity((30, 10), 3, world.dimensions))

    world.update()
    assert monster.locate()[0] == (11, 10)
    world.update()
    assert monster.locate()[0] == (11, 10)
    world.update()
    assert monster.locate()[0] == (12, 10)


def test_monster_prefers_closer_food() -> None:
    world = World((40, 40))
    monster = MonsterEntity((10, 10), 1, world.dimensions)
    apple = AppleEntity((10, 13), 50)
    orange = OrangeEntity((5, 10), 50)
    for entity in (SnakeEntity((30, 30), 3, world.dimensions), monster, apple, orange):
        world.add(entity)

    assert monster.choose_target(world) is apple
    expected = compass((10, 10), apple.locate()[0])
    world.update()
    assert monster.locate()[0] == translate((10, 10), expected, world.dimensions)
    assert monster.locate()[0] == (10, 11)


def test_monster_takes_orange_on_equal_distance() -> None:
    world = World((40, 40))
    monster = MonsterEntity((10, 10), 1, world.dimensions)
    world.add(monster)
    world.add(AppleEntity((10, 13), 50))
    orange = OrangeEntity((13, 10), 50)
    world.add(orange)
    assert monster.choose_target(world) is orange


def test_monster_chases_single_food_then_snake() -> None:
    world = World((40, 40))
    monster = MonsterEntity((10, 10), 1, world.dimensions)
    snake = SnakeEntity((30, 10), 3, world.dimensions)
    orange = OrangeEntity((10, 2), 50)
    world.add(snake)
    world.add(monster)
    world.add(orange)
    assert monster.choose_target(world) is orange

    world.remove(orange)
    assert monster.choose_target(world) is snake


def test_monster_stays_put_in_empty_world() -> None:
    world = World((40, 40))
    monster = MonsterEntity((10, 10), 1, world.dimensions)
    world.add(monster)
    world.update()
    assert monster.locate()[0] == (10, 10)


def test_snake_body_wraps_past_left_edge() -> None:
    snake = SnakeEntity((1, 4), 3, (20, 20))
    assert snake.locate() == [(1, 4), (0, 4), (19, 4)]


def test_monster_on_last_column_wraps_onto_grid() -> None:
    """A cluster centred on the edge occupies cells on the far side."""
    world = World((20, 20))
    monster = MonsterEntity((19, 10), 1, world.dimensions)
    assert monster.locate() == [(19, 10), (0, 11), (18, 9), (18, 11), (0, 9)]

    snake = SnakeEntity((0, 11), 1, world.dimensions)
    world.add(snake)
    world.add(monster)
    assert world.detect_collisions() == [(snake, monster)]


def test_monster_cells_stay_on_grid_while_moving() -> None:
    world = World((20, 20))
    monster = MonsterEntity((19, 19), 1, world.dimensions)
    world.add(monster)
    world.add(SnakeEntity((19, 5), 1, world.dimensions))
    for _ in range(5):
        world.update()
        assert all(0 <= x < 20 and 0 <= y < 20 for x, y in monster.locate())
