import pytest
from saltengine.core.system import System
from saltengine.core.entity import Entity
from saltengine.core.component import Component

class Position(Component):
    x: float = 0.0

class Velocity(Component):
    vx: float = 0.0

class MovementSystem(System):
    required_components = [Position, Velocity]

    def process_entity(self, entity, dt):
        pos = entity.get(Position)
        vel = entity.get(Velocity)
        pos.x += vel.vx * dt

class FirstSystem(System):
    priority = 10

    def __init__(self, log):
        super().__init__()
        self.log = log

    def process_entity(self, entity, dt):
        pass

    def update(self, dt):
        self.log.append("first")

class LastSystem(FirstSystem):
    priority = 0

    def update(self, dt):
        self.log.append("last")

def test_system_processing(world):
    e1 = Entity()
    e1.add(Position(x=0))
    e1.add(Velocity(vx=10))
    world.add_entity(e1)

    e2 = Entity()
    e2.add(Position(x=0))
    world.add_entity(e2)

    world.add_system(MovementSystem())
    world.update(1.0)

    assert e1.get(Position).x == 10.0
    assert e2.get(Position).x == 0.0

def test_inactive_entities_are_skipped(world):
    e = Entity()
    e.add(Position(x=0))
    e.add(Velocity(vx=10))
    e.active = False
    world.add_entity(e)

    world.add_system(MovementSystem())
    world.update(1.0)

    assert e.get(Position).x == 0.0

def test_disabled_system_does_not_run(world):
    e = world.create_entity()
    e.add(Position(x=0))
    e.add(Velocity(vx=10))

    system = MovementSystem()
    system.enabled = False
    world.add_system(system)
    world.update(1.0)

    assert e.get(Position).x == 0.0

def test_system_priority_order(world):
    log = []
    world.add_system(LastSystem(log))
    world.add_system(FirstSystem(log))

    world.update(0.016)

    assert log == ["first", "last"]

def test_system_add_remove(world):
    system = MovementSystem()

    world.add_system(system)
    assert system.world is world
    assert world.get_system(MovementSystem) is system

    world.remove_system(system)
    with pytest.raises(RuntimeError):
        _ = system.world
