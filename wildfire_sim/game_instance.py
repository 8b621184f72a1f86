"""Game instance settings: wages, starting resources and character meshes."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Optional

from wildfire_sim.game_mode import Gender
from wildfire_sim.tags import GameplayTag

_INT_MAX = 2**31 - 1


@dataclass
class MeshOptions:
    """A character mesh with its offset (location, pitch/yaw/roll) and animation."""

    using_mesh: Optional[Any] = None
    offset_location: tuple[float, float, float] = (0.0, 0.0, -90.0)
    offset_rotation: tuple[float, float, float] = (0.0, -90.0, 0.0)
    using_anim: Optional[Any] = None


class GameInstance:
    """Settings that last for the whole run of the game."""

    def __init__(
        self,
        minimum_wage: float = 0.0,
        starting_resources: Optional[dict[GameplayTag, float]] = None,
        meshes_masculine: Optional[list[MeshOptions]] = None,
        meshes_feminine: Optional[list[MeshOptions]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.minimum_wage = minimum_wage
        self.starting_resources = dict(starting_resources or {})
        self.meshes_masculine = list(meshes_masculine or [])
        self.meshes_feminine = list(meshes_feminine or [])
        self.rng = rng if rng is not None else random.Random()

    @property
    def clamped_minimum_wage(self) -> float:
        return max(0.0, min(self.minimum_wage, float(_INT_MAX)))

    def get_mesh_options_data(self, gender: GameplayTag) -> MeshOptions:
        """A random mesh suited to ``gender``; default options when there is none."""
        if gender == Gender.NON_BINARY:
            every_mesh = self.meshes_feminine + self.meshes_masculine
            if every_mesh:
                return self.rng.choice(every_mesh)
        if gender == Gender.FEMALE and self.meshes_feminine:
            return self.rng.choice(self.meshes_feminine)
        if self.meshes_masculine:
            return self.rng.choice(self.meshes_masculine)
        return MeshOptions()