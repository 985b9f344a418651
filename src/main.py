import argparse
import os
import sys
import time

import numpy as np

from algorithms import ORCAPlanner, OrcaConfig, solve_detailed
from entities import Agent, Obstacle
from utils.logger import setup_logging
from utils.scenes import SCENES, load_scene
from visualization.plotter import ScenePlotter

def run_steps(
    planner: ORCAPlanner,
    agents: list[Agent],
    obstacles: list[Obstacle],
    steps: int,
    dt: float,
    logger,
) -> None:
    log_interval = int(os.getenv("LOG_INTERVAL", "10"))

    for step in range(1, steps + 1):
        velocities = planner.step(agents, obstacles)
        for agent, velocity in zip(agents, velocities, strict=True):
            agent.update_position(agent.position + velocity * dt)

        if step % log_interval == 0 or step == steps:
            for index, agent in enumerate(agents):
                logger.info(
                    f"Step {step} agent {index}: pos=({agent.position[0]:.3f}, {agent.position[1]:.3f}), "
                    f"vel=({agent.velocity[0]:.3f}, {agent.velocity[1]:.3f})"
                )

def run(args, logger) -> np.ndarray:
    config = OrcaConfig(
        time_horizon=args.tau,
        cluster_static_agents=not args.no_cluster,
    )
    config.validate()

    agents, obstacles = load_scene(args.scene)
    subject = agents[0]
    neighbors = agents[1:]
    logger.info(
        f"Scene {args.scene}: {len(agents)} agents, {len(obstacles)} obstacles, tau={config.time_horizon}"
    )

    result = solve_detailed(subject, neighbors, obstacles, config.time_horizon, config)
    print(result.velocity)

    if not result.feasible:
        logger.warning("Solver did not find a feasible velocity")
    logger.info(
        f"Velocity: ({result.velocity[0]:.4f}, {result.velocity[1]:.4f}), "
        f"relaxation steps: {result.iterations}"
    )

    if args.plot:
        plotter = ScenePlotter(output_dir=args.output_dir)
        output_path = plotter.save_scene_plot(agents, obstacles, subject, result, args.plot)
        logger.info(f"Scene plot saved to: {output_path}")

    if args.steps > 0:
        run_steps(ORCAPlanner(config), agents, obstacles, args.steps, args.dt, logger)

    return result.velocity

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="ORCA velocity solver demo")

    parser.add_argument("--scene", default="deadlock", choices=sorted(SCENES), help="Scene name")
    parser.add_argument(
        "--tau",
        type=float,
        default=float(os.getenv("ORCA_TIME_HORIZON", "2.0")),
        help="Time horizon (s)",
    )
    parser.add_argument("--steps", type=int, default=0, help="Number of driver steps to simulate")
    parser.add_argument("--dt", type=float, default=0.1, help="Driver time step (s)")
    parser.add_argument("--no-cluster", action="store_true", help="Disable static agent clustering")
    parser.add_argument("--plot", default=None, help="Save a scene plot with this file name")
    parser.add_argument("--output-dir", default="./results", help="Output directory for plots")
    parser.add_argument("--log-dir", default=None, help="Also write logs to this directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)

    logger = setup_logging(
        verbose=args.verbose,
        log_to_file=args.log_dir is not None,
        log_dir=args.log_dir or "logs",
        timestamp=time.strftime("%Y%m%d_%H%M%S"),
    )

    try:
        run(args, logger)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}", exc_info=True)
        return 1
    except Exception as e:
        logger.error(f"Error during solve: {e}", exc_info=True)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
