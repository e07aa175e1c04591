"""
Runnable catalog of Gang-of-Four design pattern demonstrations.

Each pattern lives in its own module under behavioral/, creational/ or
structural/ and exposes main(narrator=None), a driver that runs a fixed
script and prints what happens. Pattern modules never import each other.

Key types:
- Narrator: Console output shared by every demo
- DemoDefinition / DemoRegistry: Discovery of demos by name and category
- DemoRunner: Runs one or many demos under headers
- PatternCategory: Behavioral, creational, structural
"""

from pattern_catalog.narrator import Narrator
from pattern_catalog.registry import DemoDefinition, DemoRegistry, default_registry
from pattern_catalog.runner import DemoRunner
from pattern_catalog.types import PatternCategory

__all__ = [
    "Narrator",
    "DemoDefinition",
    "DemoRegistry",
    "default_registry",
    "DemoRunner",
    "PatternCategory",
]
