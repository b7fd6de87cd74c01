"""Seeded procedural terrain height maps."""

from .terrain import GenerationConfig, generate, generate_terrain

__all__ = ["GenerationConfig", "generate", "generate_terrain"]
