import os

from entities import Agent, Obstacle

WALL_RADIUS = float(os.getenv("SCENE_WALL_RADIUS", "0.01"))

def generate_bounding_obstacles(width: float, height: float, radius: float = WALL_RADIUS) -> list[Obstacle]:
    return [
        Obstacle(start=(0.0, 0.0), end=(0.0, height), radius=radius),
        Obstacle(start=(0.0, height), end=(width, height), radius=radius),
        Obstacle(start=(width, height), end=(width, 0.0), radius=radius),
        Obstacle(start=(width, 0.0), end=(0.0, 0.0), radius=radius),
    ]

def build_deadlock_scene() -> tuple[list[Agent], list[Obstacle]]:
    position = (1.171660304069519, 0.22933036088943481)
    subject = Agent(position=position, velocity=(0.0, 0.0), radius=0.15, max_speed=0.2)
    subject.with_inner_state(0.0, (0.2, 0.2))
    subject.update_position(position)

    idle = [
        Agent(position=(0.876857340335846, 0.8371948003768921), velocity=(0.0, 0.0), radius=0.15, max_speed=0.2),
        Agent(position=(1.1547585725784302, 0.3865005373954773), velocity=(0.0, 0.0), radius=0.15, max_speed=0.2),
    ]
    for agent in idle:
        agent.with_inner_state(0.0, agent.position)

    return [subject, *idle], generate_bounding_obstacles(1.6, 2.0)

def build_crossing_scene() -> tuple[list[Agent], list[Obstacle]]:
    left = Agent(position=(-2.0, 0.0), velocity=(0.0, 0.0), radius=0.2, max_speed=0.5)
    left.with_inner_state(0.05, (2.0, 0.0))
    left.update_position(left.position)

    right = Agent(position=(2.0, 0.0), velocity=(0.0, 0.0), radius=0.2, max_speed=0.5)
    right.with_inner_state(0.05, (-2.0, 0.0))
    right.update_position(right.position)

    return [left, right], []

SCENES = {
    "deadlock": build_deadlock_scene,
    "crossing": build_crossing_scene,
}

def load_scene(name: str) -> tuple[list[Agent], list[Obstacle]]:
    if name not in SCENES:
        raise ValueError(f"Unknown scene: {name}")
    return SCENES[name]()
