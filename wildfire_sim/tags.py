"""Hierarchical gameplay tags and the tags the game defines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class GameplayTag:
    """A dotted, hierarchical name such as ``Game.Vehicle.Fire.Engine``."""

    name: str = ""

    @property
    def is_valid(self) -> bool:
        return bool(self.name)

    def matches_tag(self, other: GameplayTag) -> bool:
        """True if this tag is ``other`` or lies beneath it in the hierarchy."""
        if not self.is_valid or not other.is_valid:
            return False
        if self.name == other.name:
            return True
        prefix = other.name if other.name.endswith(".") else other.name + "."
        return self.name.startswith(prefix)

    def matches_tag_exact(self, other: GameplayTag) -> bool:
        """True only if both tags are valid and name the same node."""
        return self.is_valid and other.is_valid and self.name == other.name

    def __str__(self) -> str:
        return self.name


# Resources
RESOURCE_MONEY = GameplayTag("Game.Resource.Money")
RESOURCE_WATER = GameplayTag("Game.Resource.Water")
RESOURCE_OXYGEN = GameplayTag("Game.Resource.Oxygen")
RESOURCE_POWER = GameplayTag("Game.Resource.Power")

# Callout flags
CALLOUTS_FLAG = GameplayTag("Game.Callouts.Flag.")
CALLOUTS_FLAG_POWERLINES_DOWN = GameplayTag("Game.Callouts.Flag.Powerlines")
CALLOUTS_FLAG_CHEMICAL_SPILL = GameplayTag("Game.Callouts.Flag.Chemical")
CALLOUTS_FLAG_EXPLOSIONS = GameplayTag("Game.Callouts.Flag.Explosion")
CALLOUTS_FLAG_HAZMAT = GameplayTag("Game.Callouts.Flag.HazMat")

# Real estate
REALTY = GameplayTag("Game.Realty")
REALTY_RESIDENTIAL = GameplayTag("Game.Realty.Residential")
REALTY_RESIDENTIAL_HOME = GameplayTag("Game.Realty.Residential.Home")
REALTY_COMMERCIAL = GameplayTag("Game.Realty.Commercial")
REALTY_COMMERCIAL_STORE = GameplayTag("Game.Realty.Commercial.Store")

# Tools
TOOL_FIRE = GameplayTag("Game.Tool.Fire")
TOOL_FIRE_FLARE = GameplayTag("Game.Tool.Fire.Flare")
TOOL_FIRE_FLASHLIGHT = GameplayTag("Game.Tool.Fire.Flashlight")
TOOL_FIRE_EXTINGUISHER = GameplayTag("Game.Tool.Fire.Extinguisher")
TOOL_NOZZLE = GameplayTag("Game.Tool.Fire.Nozzle")
TOOL_NOZZLE_WILDLAND = GameplayTag("Game.Tool.Fire.Nozzle.Wildland")
TOOL_NOZZLE_STRUCTURE = GameplayTag("Game.Tool.Fire.Nozzle.Structure")
TOOL_FIRE_SHOVEL = GameplayTag("Game.Tool.Fire.Shovel")
TOOL_FIRE_PULASKI = GameplayTag("Game.Tool.Fire.Pulaski")
TOOL_FIRE_MCLEOD = GameplayTag("Game.Tool.Fire.McLeod")
TOOL_FIRE_HALLIGAN = GameplayTag("Game.Tool.Fire.Halligan")
TOOL_FIRE_RUBBISH_HOOK = GameplayTag("Game.Tool.Fire.RubbishHook")
TOOL_FIRE_PIKE = GameplayTag("Game.Tool.Fire.Pike")
TOOL_FIRE_CHAINSAW = GameplayTag("Game.Tool.Fire.Chainsaw")
TOOL_FIRE_BACKPUMP = GameplayTag("Game.Tool.Fire.Backpump")
TOOL_FIRE_SHELTER = GameplayTag("Game.Tool.Fire.Shelter")

TOOL_MEDIC = GameplayTag("Game.Tool.Medic")
TOOL_MEDIC_KIT = GameplayTag("Game.Tool.Medic.Kit")
TOOL_MEDIC_TRAUMA = GameplayTag("Game.Tool.Medic.Trauma")
TOOL_MEDIC_BACKBOARD = GameplayTag("Game.Tool.Medic.Backboard")
TOOL_MEDIC_DRUGS = GameplayTag("Game.Tool.Medic.Narcotics")

# Vehicles
VEHICLE_CIVILIAN = GameplayTag("Game.Vehicle.Civilian")
VEHICLE_POLICE = GameplayTag("Game.Vehicle.Police")
VEHICLE_FIRE = GameplayTag("Game.Vehicle.Fire")

VEHICLE_FIRE_CHIEF = GameplayTag("Game.Vehicle.Fire.Chief")
VEHICLE_FIRE_MEDIC = GameplayTag("Game.Vehicle.Fire.Medic")
VEHICLE_FIRE_ENGINE = GameplayTag("Game.Vehicle.Fire.Engine")
VEHICLE_FIRE_ENGINE_WILDLAND = GameplayTag("Game.Vehicle.Fire.Engine.Wildland")
VEHICLE_FIRE_ENGINE_STRUCTURE = GameplayTag("Game.Vehicle.Fire.Engine.Structure")
VEHICLE_FIRE_LADDER = GameplayTag("Game.Vehicle.Fire.Ladder")
VEHICLE_FIRE_SQUAD = GameplayTag("Game.Vehicle.Fire.Squad")
VEHICLE_FIRE_DOZER = GameplayTag("Game.Vehicle.Fire.Dozer")
VEHICLE_FIRE_TRANSPORT = GameplayTag("Game.Vehicle.Fire.Transport")
VEHICLE_FIRE_CREW = GameplayTag("Game.Vehicle.Fire.Crew")
VEHICLE_FIRE_UTILITY = GameplayTag("Game.Vehicle.Fire.Utility")
VEHICLE_FIRE_INVESTIGATOR = GameplayTag("Game.Vehicle.Fire.Investigator")
VEHICLE_FIRE_HELICOPTER = GameplayTag("Game.Vehicle.Fire.Helicopter")