import pygame
import pytest

from tileengine.actors import Player
from tileengine.engine import Engine, main
from tileengine.renderer import Renderer
from tileengine.timer import Timer

BITMAPS = {
    "player.bmp": (50, 50),
    "wall.bmp": (10, 10),
    "floor.bmp": (10, 10),
    "goal.bmp": (10, 10),
    "monster.bmp": (10, 10),
}


@pytest.fixture(autouse=True)
def _workspace(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    data = tmp_path / "data"
    data.mkdir()
    for name, size in BITMAPS.items():
        surface = pygame.Surface(size)
        surface.fill((0, 0, 255))
        pygame.image.save(surface, str(data / name))
    (tmp_path / "level.map").write_text("*P\n")
    yield tmp_path
    pygame.quit()


def test_get_instance_is_shared():
    engine = Engine.get_instance()
    engine.event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
    shared = Engine.get_instance()
    assert shared.event.type == pygame.KEYDOWN
    assert shared.event.key == pygame.K_w


def test_world_delta_seconds_reads_timer():
    engine = Engine.get_instance()
    engine.timer = Timer(clock=lambda: 500)
    engine.timer.tick()
    assert Engine.world_delta_seconds() == pytest.approx(0.5)


def test_initialize_opens_window_and_loads_world():
    engine = Engine.get_instance()
    engine.initialize("level.map")
    assert engine.is_running is True
    assert engine.window.get_size() == (800, 600)
    assert len(engine.world.actors) == 4
    assert sum(isinstance(actor, Player) for actor in engine.world.actors) == 1


def test_run_stops_on_quit():
    engine = Engine.get_instance()
    engine.initialize("level.map")
    Renderer.get_instance().surface = engine.window
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.run()
    assert engine.is_running is False
    assert engine.event.type == pygame.QUIT


def test_terminate_releases_world_and_input():
    engine = Engine.get_instance()
    engine.initialize("level.map")
    engine.terminate()
    assert engine.world is None
    assert engine.input_device is None
    assert pygame.display.get_init() is False


def test_main_missing_map_raises_and_cleans_up():
    with pytest.raises(FileNotFoundError):
        main(["missing.map"])
    assert Engine.get_instance().world is None
    assert pygame.display.get_init() is False