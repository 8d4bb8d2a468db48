"""
Service layer for Wayfarer.

Services are the stateful orchestrators built on top of the skills.
"""

from __future__ import annotations

from wayfarer.services.combat import CombatSession
from wayfarer.services.encounters import EncounterGenerator

__all__ = [
    "CombatSession",
    "EncounterGenerator",
]
