"""Runtime package.

Keep this module dependency-light: importing `scene_partner.runtime.*` in unit
tests should not open sockets or read secrets.
"""

__all__: list[str] = []
