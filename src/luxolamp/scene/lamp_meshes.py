"""Precomputed meshes for every lamp segment.

Primitive shapes do not change between frames, so they are generated
once per set of dimensions and shared by every assembled frame.
"""

import logging
from dataclasses import dataclass

from luxolamp.constants import (
    ARM_SLICES,
    BASE_HIGHLIGHT_SCALE,
    BASE_SLICES,
    HIGHLIGHT_SLICES,
    HIGHLIGHT_STACKS,
    JOINT_SLICES,
    JOINT_STACKS,
    LAMP_DIMENSIONS,
    SHADE_SLICES,
    TABLE_EXTENT,
    TABLE_STEP,
    LampDimensions,
)
from luxolamp.core.mesh import Mesh
from luxolamp.scene.procedural_geometry import (
    make_cone,
    make_cylinder,
    make_disk,
    make_grid,
    make_uv_sphere,
    make_wire_cube,
    make_wire_sphere,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LampMeshes:
    base_side: Mesh
    base_cap: Mesh
    lower_arm: Mesh
    upper_arm: Mesh
    joint: Mesh
    shade: Mesh
    shade_cap: Mesh
    glow: Mesh
    base_highlight: Mesh
    joint_highlight: tuple[Mesh, Mesh]
    table: Mesh

    @classmethod
    def build(cls, dimensions: LampDimensions = LAMP_DIMENSIONS) -> "LampMeshes":
        d = dimensions
        meshes = cls(
            base_side=make_cylinder(d.base_radius, d.base_height, BASE_SLICES),
            base_cap=make_disk(0.0, d.base_radius, BASE_SLICES),
            lower_arm=make_cylinder(d.arm_radius, d.lower_arm_length, ARM_SLICES),
            upper_arm=make_cylinder(d.arm_radius, d.upper_arm_length, ARM_SLICES),
            joint=make_uv_sphere(d.joint_radius, JOINT_SLICES, JOINT_STACKS),
            # Narrow end at the joint, wide end at the opening
            shade=make_cone(d.neck_radius, d.lampshade_radius, d.lampshade_height, SHADE_SLICES),
            shade_cap=make_disk(0.0, d.neck_radius, SHADE_SLICES),
            glow=make_disk(0.0, d.glow_radius, SHADE_SLICES),
            base_highlight=make_wire_cube(d.base_radius * BASE_HIGHLIGHT_SCALE),
            joint_highlight=make_wire_sphere(d.highlight_radius, HIGHLIGHT_SLICES, HIGHLIGHT_STACKS),
            table=make_grid(TABLE_EXTENT, TABLE_STEP),
        )
        logger.debug(
            "Built lamp meshes: %d vertices total",
            sum(m.vertex_count for m in meshes.all_meshes()),
        )
        return meshes

    def all_meshes(self) -> list[Mesh]:
        result = []
        for value in vars(self).values():
            if isinstance(value, tuple):
                result.extend(value)
            else:
                result.append(value)
        return result
