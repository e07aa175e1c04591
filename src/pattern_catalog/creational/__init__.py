"""
Creational patterns: how objects get constructed.

Modules:
- abstract_factory: Widget families per operating system
- builder: Step-by-step construction of an immutable product
- factory: Shapes created from a type name
- prototype: Objects copied from an existing instance
- singleton: One lazily created, thread-safe instance
"""
