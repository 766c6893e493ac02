"""Material definitions for the lamp segments."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Material:
    """Rendering material properties.

    Unlit materials ignore every light and draw their flat colour, as the
    selection highlight and the glow disk do.
    """
    color: tuple[float, float, float] = (0.8, 0.8, 0.8)
    opacity: float = 1.0
    specular: tuple[float, float, float] = (0.0, 0.0, 0.0)
    shininess: float = 30.0
    lit: bool = True

    @property
    def transparent(self) -> bool:
        return self.opacity < 1.0


# Metallic lamp body
BASE_MATERIAL = Material(color=(0.2, 0.2, 0.22), specular=(0.9, 0.9, 0.95), shininess=80.0)
ARM_MATERIAL = Material(color=(0.25, 0.25, 0.28), specular=(0.95, 0.95, 1.0), shininess=100.0)
JOINT_MATERIAL = Material(color=(0.22, 0.22, 0.25), specular=(1.0, 1.0, 1.0), shininess=120.0)
SHADE_MATERIAL = Material(color=(0.3, 0.3, 0.35), specular=(0.8, 0.8, 0.85), shininess=90.0)

# Matte table
TABLE_MATERIAL = Material(color=(0.4, 0.4, 0.4), specular=(0.2, 0.2, 0.2), shininess=10.0)

# Unlit overlays
HIGHLIGHT_MATERIAL = Material(color=(1.0, 1.0, 0.0), lit=False)
GLOW_MATERIAL = Material(color=(1.0, 0.9, 0.2), opacity=0.9, lit=False)
