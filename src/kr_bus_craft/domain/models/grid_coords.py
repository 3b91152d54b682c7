"""Grid coordinates domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCoords:
    """Block position in the 1 block = 1 meter world."""

    x: int
    y: int
    z: int
    origin_name: str

    @property
    def teleport_command(self) -> str:
        """Chat command that teleports the player to these coordinates."""
        return f"/tp @s {self.x} {self.y} {self.z}"
