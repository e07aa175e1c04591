"""
Structural patterns: how objects are composed into larger structures.

Modules:
- adapter: Legacy service behind a new interface
- bridge: Shapes and colors that vary independently
- composite: Files and folders through one interface
- decorator: Coffee with stackable condiments
- facade: One call to drive a home theater
- proxy: Images loaded on first display
"""
