"""Combines cached meshes, chain frames and lights into drawable frame state.

Hierarchy of placements::

    table                world, slightly below the origin
    base                 chain "base"
    +-- base_side/cap    upright cylinder + top disk
    +-- lower_joint      joint sphere at the top of the base
        +-- lower_arm    upright cylinder in chain "lower_arm"
        +-- upper_joint  joint sphere at the end of the lower arm
            +-- upper_arm
            +-- shade_joint  joint sphere at the end of the upper arm
                +-- lampshade    cone + cap (+ glow) in chain "lampshade"

The renderer takes over from the returned :class:`SceneFrame`.
"""

from dataclasses import dataclass
from typing import Optional, Union

from luxolamp.constants import (
    FILL_LIGHT_AMBIENT,
    FILL_LIGHT_DIFFUSE,
    FILL_LIGHT_DIRECTION,
    FILL_LIGHT_SPECULAR,
    LAMP_DIMENSIONS,
    SPOTLIGHT_SETTINGS,
    TABLE_OFFSET_Y,
    LampDimensions,
    SpotlightSettings,
)
from luxolamp.core.material import (
    ARM_MATERIAL,
    BASE_MATERIAL,
    GLOW_MATERIAL,
    HIGHLIGHT_MATERIAL,
    JOINT_MATERIAL,
    SHADE_MATERIAL,
    TABLE_MATERIAL,
    Material,
)
from luxolamp.core.math_utils import (
    Mat4,
    Vec3,
    X_AXIS,
    mat4_rotation_deg,
    mat4_translation,
    normalize,
    vec3,
)
from luxolamp.core.mesh import Mesh
from luxolamp.core.state import Joint, JointState
from luxolamp.kinematics.chain import ChainPose, KinematicChain
from luxolamp.kinematics.spotlight import SpotlightParams, spotlight_for_pose
from luxolamp.scene.lamp_meshes import LampMeshes

# Stands a +Z surface of revolution up along the arm's +Y
UPRIGHT = mat4_rotation_deg(-90.0, X_AXIS)

# Chain frame the selection highlight sphere sits in, per joint
HIGHLIGHT_FRAMES = {
    Joint.LOWER_ARM: "lower_joint",
    Joint.UPPER_ARM: "upper_joint",
    Joint.LAMPSHADE: "shade_joint",
}


@dataclass(frozen=True)
class DirectionalLight:
    """A light at infinity; *direction* points toward the light."""
    direction: Vec3
    ambient: tuple[float, float, float]
    diffuse: tuple[float, float, float]
    specular: tuple[float, float, float] = (0.0, 0.0, 0.0)


Light = Union[DirectionalLight, SpotlightParams]


@dataclass(frozen=True)
class DrawItem:
    """One mesh placed in the world with its material."""
    name: str
    mesh: Mesh
    transform: Mat4
    material: Material


@dataclass(frozen=True)
class SceneFrame:
    """Everything the renderer needs for one frame."""
    items: tuple[DrawItem, ...]
    lights: tuple[Light, ...]
    pose: ChainPose
    spotlight: Optional[SpotlightParams]
    selected_joint: Joint

    def find(self, name: str) -> list[DrawItem]:
        return [item for item in self.items if item.name == name]


FILL_LIGHT = DirectionalLight(
    direction=normalize(vec3(*FILL_LIGHT_DIRECTION)),
    ambient=FILL_LIGHT_AMBIENT,
    diffuse=FILL_LIGHT_DIFFUSE,
    specular=FILL_LIGHT_SPECULAR,
)


class SceneAssembler:
    """Builds a :class:`SceneFrame` from the current joint state.

    Meshes are generated once at construction; each call to
    :meth:`assemble` only recomputes the chain and the spotlight.
    """

    def __init__(
        self,
        dimensions: LampDimensions = LAMP_DIMENSIONS,
        spotlight: SpotlightSettings = SPOTLIGHT_SETTINGS,
        meshes: Optional[LampMeshes] = None,
    ) -> None:
        self.dimensions = dimensions
        self.spotlight_settings = spotlight
        self.chain = KinematicChain(dimensions)
        self.meshes = meshes or LampMeshes.build(dimensions)

    def assemble(self, state: JointState) -> SceneFrame:
        pose = self.chain.solve(state.angles)
        spot = spotlight_for_pose(
            pose, state.spotlight_enabled, self.dimensions, self.spotlight_settings,
        )
        items = self._place_segments(pose, state.selected_joint, state.spotlight_enabled)
        lights: tuple[Light, ...] = (FILL_LIGHT,) if spot is None else (FILL_LIGHT, spot)
        return SceneFrame(
            items=tuple(items),
            lights=lights,
            pose=pose,
            spotlight=spot,
            selected_joint=state.selected_joint,
        )

    def _place_segments(
        self, pose: ChainPose, selected: Joint, glow: bool,
    ) -> list[DrawItem]:
        m = self.meshes
        d = self.dimensions
        items = [
            DrawItem("table", m.table, mat4_translation(0.0, TABLE_OFFSET_Y, 0.0), TABLE_MATERIAL),
            DrawItem("base_side", m.base_side, pose.base @ UPRIGHT, BASE_MATERIAL),
            DrawItem(
                "base_cap", m.base_cap,
                pose.base @ UPRIGHT @ mat4_translation(0.0, 0.0, d.base_height),
                BASE_MATERIAL,
            ),
            DrawItem("lower_joint", m.joint, pose.frame("lower_joint"), JOINT_MATERIAL),
            DrawItem("lower_arm", m.lower_arm, pose.frame("lower_arm") @ UPRIGHT, ARM_MATERIAL),
            DrawItem("upper_joint", m.joint, pose.frame("upper_joint"), JOINT_MATERIAL),
            DrawItem("upper_arm", m.upper_arm, pose.frame("upper_arm") @ UPRIGHT, ARM_MATERIAL),
            DrawItem("shade_joint", m.joint, pose.frame("shade_joint"), JOINT_MATERIAL),
            DrawItem("shade", m.shade, pose.lampshade, SHADE_MATERIAL),
            DrawItem("shade_cap", m.shade_cap, pose.lampshade, SHADE_MATERIAL),
        ]
        items.extend(self._highlight(pose, selected))
        if glow:
            items.append(DrawItem(
                "glow", m.glow,
                pose.lampshade @ mat4_translation(0.0, 0.0, d.lampshade_height),
                GLOW_MATERIAL,
            ))
        return items

    def _highlight(self, pose: ChainPose, selected: Joint) -> list[DrawItem]:
        if selected == Joint.BASE:
            placement = pose.base @ mat4_translation(0.0, self.dimensions.base_height * 0.5, 0.0)
            return [DrawItem("highlight", self.meshes.base_highlight, placement, HIGHLIGHT_MATERIAL)]
        frame = pose.frame(HIGHLIGHT_FRAMES[selected])
        return [
            DrawItem("highlight", mesh, frame, HIGHLIGHT_MATERIAL)
            for mesh in self.meshes.joint_highlight
        ]
