"""Organism module - host controller wiring sprites, layout and viewport together."""

from .tab import OrganismTab, PointerEvent

__all__ = ["OrganismTab", "PointerEvent"]
