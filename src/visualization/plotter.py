from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle

from algorithms import OrcaResult
from entities import Agent, Obstacle

class ScenePlotter:
    def __init__(self, output_dir: str, velocity_extent: float | None = None):
        self.output_dir = Path(output_dir)
        self.velocity_extent = velocity_extent

    def _draw_scene(
        self,
        ax,
        agents: Sequence[Agent],
        obstacles: Sequence[Obstacle],
        subject: Agent,
        velocity: np.ndarray,
    ) -> None:
        for obstacle in obstacles:
            ax.plot(
                [obstacle.start[0], obstacle.end[0]],
                [obstacle.start[1], obstacle.end[1]],
                "k-",
                linewidth=max(1.0, obstacle.radius * 100),
                alpha=0.8,
            )

        for agent in agents:
            if agent is subject:
                color = "tab:blue"
            elif agent.merged_into_obstacle:
                color = "tab:gray"
            else:
                color = "tab:orange"

            ax.add_patch(Circle(tuple(agent.position), agent.radius, color=color, alpha=0.5))
            if agent.confidence > 0.0:
                ax.add_patch(
                    Circle(
                        tuple(agent.position),
                        agent.clearance,
                        fill=False,
                        linestyle="--",
                        color=color,
                    )
                )
            if agent.velocity.any():
                ax.arrow(
                    agent.position[0],
                    agent.position[1],
                    agent.velocity[0],
                    agent.velocity[1],
                    color=color,
                    width=0.005,
                    length_includes_head=True,
                )

        if velocity.any():
            ax.arrow(
                subject.position[0],
                subject.position[1],
                velocity[0],
                velocity[1],
                color="tab:green",
                width=0.008,
                length_includes_head=True,
            )

        ax.scatter(
            [subject.target[0]],
            [subject.target[1]],
            c="red",
            s=150,
            marker="*",
            label="Target",
            zorder=10,
            edgecolors="black",
        )

        ax.set_title("Scene")
        ax.set_xlabel("X (m)")
        ax.set_ylabel("Y (m)")
        ax.grid(True, alpha=0.3)
        ax.axis("equal")
        ax.legend(loc="upper right")

    def _draw_velocity_space(self, ax, subject: Agent, result: OrcaResult) -> None:
        extent = self.velocity_extent or max(2.0 * subject.max_speed, 1e-3)
        span = np.array([-extent * 4.0, extent * 4.0])

        for plane in result.halfplanes:
            point = subject.velocity + plane.u
            direction = plane.direction()
            if not direction.any():
                continue
            xs = point[0] + span * direction[0]
            ys = point[1] + span * direction[1]
            ax.plot(xs, ys, "r-", linewidth=1.0, alpha=0.7)
            ax.arrow(
                point[0],
                point[1],
                plane.n[0] * extent * 0.1,
                plane.n[1] * extent * 0.1,
                color="red",
                width=extent * 0.005,
                alpha=0.7,
            )

        ax.add_patch(Circle((0.0, 0.0), subject.max_speed, fill=False, linestyle=":", color="gray"))
        ax.scatter(
            [subject.velocity[0]],
            [subject.velocity[1]],
            c="tab:blue",
            s=80,
            marker="o",
            label="Preferred",
            zorder=10,
        )
        ax.scatter(
            [result.velocity[0]],
            [result.velocity[1]],
            c="tab:green",
            s=80,
            marker="s",
            label="Result" if result.feasible else "Result (infeasible)",
            zorder=10,
        )

        ax.set_xlim(-extent, extent)
        ax.set_ylim(-extent, extent)
        ax.set_aspect("equal")
        ax.set_title(f"Velocity space ({result.iterations} relaxation steps)")
        ax.set_xlabel("Vx (m/s)")
        ax.set_ylabel("Vy (m/s)")
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right")

    def save_scene_plot(
        self,
        agents: Sequence[Agent],
        obstacles: Sequence[Obstacle],
        subject: Agent,
        result: OrcaResult,
        filename: str = "scene.png",
    ) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / filename

        fig, (ax_scene, ax_velocity) = plt.subplots(1, 2, figsize=(16, 8))
        self._draw_scene(ax_scene, agents, obstacles, subject, result.velocity)
        self._draw_velocity_space(ax_velocity, subject, result)

        plt.tight_layout()
        plt.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)

        return output_path
