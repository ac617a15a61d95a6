from tileengine.actor import Actor
from tileengine.component import ActorComponent, SceneComponent
from tileengine.vector import Vector2D


class RecordingScene(SceneComponent):
    def __init__(self, log, name):
        super().__init__()
        self.log = log
        self.name = name

    def render(self):
        self.log.append(self.name)


def test_default_location_is_origin():
    actor = Actor()
    assert actor.location == Vector2D()
    assert actor.components == []


def test_location_is_copied_from_argument():
    start = Vector2D(2, 3)
    actor = Actor(start)
    actor.add_actor_world_offset(Vector2D(1, 0))
    assert start == Vector2D(2, 3)


def test_actors_do_not_share_locations_or_components():
    a = Actor()
    b = Actor()
    a.add_actor_world_offset(Vector2D(1, 1))
    a.create_default_subobject(SceneComponent())
    assert b.location == Vector2D()
    assert b.components == []


def test_offset_and_inverse_return_to_start():
    actor = Actor(Vector2D(4, 4))
    actor.add_actor_world_offset(Vector2D(0, -1))
    actor.add_actor_world_offset(Vector2D(0, 1))
    assert actor.location == Vector2D(4, 4)


def test_offset_moves_actor():
    actor = Actor(Vector2D(1, 1))
    actor.add_actor_world_offset(Vector2D(-1, 0))
    assert actor.location == Vector2D(0, 1)


def test_create_default_subobject_attaches_and_returns():
    actor = Actor()
    component = SceneComponent()
    returned = actor.create_default_subobject(component)
    assert returned is component
    assert component.owner is actor
    assert actor.components == [component]


def test_render_calls_scene_components_in_order_and_skips_others():
    log = []
    actor = Actor()
    actor.create_default_subobject(RecordingScene(log, "first"))
    actor.create_default_subobject(ActorComponent())
    actor.create_default_subobject(RecordingScene(log, "second"))
    actor.render()
    assert log == ["first", "second"]


def test_tick_leaves_actor_unchanged():
    actor = Actor(Vector2D(5, 6))
    actor.tick()
    assert actor.location == Vector2D(5, 6)