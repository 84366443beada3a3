import random

from conftest import FixedRandom
from difficulty import PROFILES
from settings import WIDTH, GROUND_Y, BURST_COUNT, PARTICLE_LIFE, GOLD
from spawner import Spawner


def test_obstacle_interval_tightens_with_speed():
    spawner = Spawner(FixedRandom(0.9))
    easy = PROFILES["easy"]
    for _ in range(110):  # 120 - 2 * 5
        assert spawner.spawn_obstacles(easy, 2, WIDTH, GROUND_Y) == []
    spawned = spawner.spawn_obstacles(easy, 2, WIDTH, GROUND_Y)
    assert len(spawned) == 1
    ob = spawned[0]
    assert (ob.x, ob.width, ob.height) == (WIDTH, 25, 40)
    assert ob.y + ob.height == GROUND_Y
    assert spawner.obstacle_timer == 0


def test_second_obstacle_on_medium():
    medium = PROFILES["medium"]
    spawner = Spawner(FixedRandom(0.1))
    spawner.obstacle_timer = 200
    first, second = spawner.spawn_obstacles(medium, 3, WIDTH, GROUND_Y)
    assert second.x == WIDTH + 100
    assert second.height == first.height - 10
    assert second.y + second.height == GROUND_Y

    spawner = Spawner(FixedRandom(0.5))
    spawner.obstacle_timer = 200
    assert len(spawner.spawn_obstacles(medium, 3, WIDTH, GROUND_Y)) == 1


def test_never_pairs_on_easy():
    spawner = Spawner(FixedRandom(0.0))
    spawner.obstacle_timer = 500
    assert len(spawner.spawn_obstacles(PROFILES["easy"], 2, WIDTH, GROUND_Y)) == 1


def test_coin_spawn_height():
    spawner = Spawner(FixedRandom(0.5))
    easy = PROFILES["easy"]
    for _ in range(180):
        assert spawner.spawn_coins(easy, WIDTH, GROUND_Y) == []
    (coin,) = spawner.spawn_coins(easy, WIDTH, GROUND_Y)
    assert coin.x == WIDTH
    assert coin.y == GROUND_Y - 150
    assert not coin.collected
    assert spawner.coin_timer == 0


def test_coin_band():
    spawner = Spawner(random.Random(7))
    for _ in range(50):
        spawner.coin_timer = 1000
        (coin,) = spawner.spawn_coins(PROFILES["hard"], WIDTH, GROUND_Y)
        assert GROUND_Y - 200 < coin.y <= GROUND_Y - 100


def test_reset():
    spawner = Spawner()
    spawner.obstacle_timer, spawner.coin_timer = 5, 9
    spawner.reset()
    assert (spawner.obstacle_timer, spawner.coin_timer) == (0, 0)


def test_burst():
    particles = Spawner(random.Random(3)).burst(10, 20, GOLD)
    assert len(particles) == BURST_COUNT
    for p in particles:
        assert (p.x, p.y, p.color, p.life) == (10, 20, GOLD, PARTICLE_LIFE)
        assert -4 <= p.vel_x < 4 and -4 <= p.vel_y < 4


def test_clouds():
    clouds = Spawner(random.Random(5)).make_clouds(WIDTH)
    assert len(clouds) == 5
    for c in clouds:
        assert 0 <= c.x < WIDTH
        assert 50 <= c.y < 150
        assert 60 <= c.width < 100
