"""Headless lamp snapshot: render one pose to PNG without OpenGL.

Assembles the scene for the given joint angles, projects every draw
item orthographically and rasterises it with PIL (painter's algorithm
for surfaces, wire overlays on top). Also prints the chain frame
origins and the derived spotlight.

Usage::

    python -m tools.pose_snapshot --lower 45 --upper -15 --output results/pose.png
    python -m tools.pose_snapshot --joint 3 --no-spotlight --azimuth 90
"""

import sys

sys.path.insert(0, "src")
sys.path.insert(0, ".")

import argparse
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from luxolamp.core.config_loader import LampConfig, load_lamp_config
from luxolamp.core.math_utils import transform_points
from luxolamp.core.state import JointState, selected_joint_text, spotlight_text
from luxolamp.scene.scene_assembler import SceneAssembler, SceneFrame

# ── Projection ─────────────────────────────────────────────────────────


def orthographic_project(
    positions: np.ndarray,
    azimuth: float = 20.0,
    elevation: float = 30.0,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Project world points (Y up) onto a view plane.

    Parameters
    ----------
    positions : (V, 3) float array
    azimuth : degrees about +Y, 0 looks from +Z
    elevation : degrees above the table plane

    Returns
    -------
    screen_x, screen_y, depth : (V,) float arrays, larger depth is nearer
    """
    az = np.radians(azimuth)
    el = np.radians(elevation)
    ca, sa = np.cos(az), np.sin(az)
    ce, se = np.cos(el), np.sin(el)

    right = np.array([ca, 0.0, -sa])
    up = np.array([-sa * se, ce, -ca * se])
    toward_eye = np.array([sa * ce, se, ca * ce])

    p = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    return p @ right, p @ up, p @ toward_eye


# ── Shading ────────────────────────────────────────────────────────────

def _face_brightness(tris: np.ndarray, light_dir: np.ndarray) -> np.ndarray:
    """Two-sided diffuse term per triangle with an ambient floor."""
    normals = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    normals /= np.maximum(np.linalg.norm(normals, axis=1, keepdims=True), 1e-10)
    dot = np.abs(normals @ light_dir)
    return 0.35 + 0.65 * np.clip(dot, 0.0, 1.0)


def _spot_boost(centroids: np.ndarray, frame: SceneFrame) -> np.ndarray:
    """Spot cone contribution per triangle centroid (0 outside the cone)."""
    spot = frame.spotlight
    if spot is None:
        return np.zeros(len(centroids))
    to_point = centroids - spot.position
    dist = np.maximum(np.linalg.norm(to_point, axis=1), 1e-10)
    cos_angle = (to_point @ spot.direction) / dist
    kc, kl, kq = spot.attenuation
    atten = 1.0 / (kc + kl * dist + kq * dist * dist)
    inside = cos_angle >= spot.cos_cutoff
    return np.where(inside, np.power(np.clip(cos_angle, 0.0, 1.0), spot.exponent) * atten, 0.0)


# ── Render ─────────────────────────────────────────────────────────────

def render_frame(
    frame: SceneFrame,
    azimuth: float = 20.0,
    elevation: float = 30.0,
    width: int = 800,
    height: int = 800,
    output_path: str | Path | None = None,
    bg_color: tuple[int, int, int] = (0, 0, 0),
    margin: int = 30,
) -> Image.Image:
    """Rasterise an assembled frame to a PIL image."""
    light_dir = frame.lights[0].direction
    polys, lines = [], []

    for item in frame.items:
        color = np.asarray(item.material.color, dtype=np.float64)
        if item.mesh.topology.is_line:
            segs = item.mesh.line_segments().astype(np.float64)
            world = transform_points(item.transform, segs.reshape(-1, 3)).reshape(-1, 2, 3)
            lines.append((world, color))
            continue
        tris = item.mesh.triangles().astype(np.float64)
        if len(tris) == 0:
            continue
        world = transform_points(item.transform, tris.reshape(-1, 3)).reshape(-1, 3, 3)
        if item.material.lit:
            shade = _face_brightness(world, light_dir)[:, np.newaxis] * color
            warm = np.asarray(frame.spotlight.diffuse) if frame.spotlight else np.zeros(3)
            shade = shade + _spot_boost(world.mean(axis=1), frame)[:, np.newaxis] * warm * color
        else:
            shade = np.tile(color, (len(world), 1))
        polys.append((world, shade))

    all_points = [w.reshape(-1, 3) for w, _ in polys] + [w.reshape(-1, 3) for w, _ in lines]
    sx, sy, _ = orthographic_project(np.concatenate(all_points), azimuth, elevation)
    xmin, ymin = float(sx.min()), float(sy.min())
    x_range = max(float(sx.max()) - xmin, 1e-6)
    y_range = max(float(sy.max()) - ymin, 1e-6)
    scale = min((width - 2 * margin) / x_range, (height - 2 * margin) / y_range)
    x_off = margin + (width - 2 * margin - x_range * scale) / 2
    y_off = margin + (height - 2 * margin - y_range * scale) / 2

    def to_pixels(points: np.ndarray):
        px, py, depth = orthographic_project(points, azimuth, elevation)
        px = (px - xmin) * scale + x_off
        py = height - ((py - ymin) * scale + y_off)
        return px, py, depth

    img = Image.new("RGB", (width, height), bg_color)
    draw = ImageDraw.Draw(img)

    # Painter's algorithm over every surface triangle, far to near
    if polys:
        tris = np.concatenate([w for w, _ in polys])
        shades = np.concatenate([s for _, s in polys])
        px, py, depth = to_pixels(tris.reshape(-1, 3))
        px, py = px.reshape(-1, 3), py.reshape(-1, 3)
        order = np.argsort(depth.reshape(-1, 3).mean(axis=1))
        rgb = np.clip(shades * 255.0, 0, 255).astype(np.uint8)
        for i in order:
            pts = [(int(px[i, k] + 0.5), int(py[i, k] + 0.5)) for k in range(3)]
            draw.polygon(pts, fill=tuple(int(c) for c in rgb[i]))

    for segs, color in lines:
        px, py, _ = to_pixels(segs.reshape(-1, 3))
        fill = tuple(int(c * 255) for c in color)
        for k in range(0, len(px), 2):
            draw.line([(px[k], py[k]), (px[k + 1], py[k + 1])], fill=fill, width=1)

    draw.text((10, 10), selected_joint_text(frame.selected_joint), fill=(255, 255, 255))
    draw.text((10, 30), spotlight_text(frame.spotlight is not None), fill=(255, 255, 255))

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        img.save(str(output_path))
    return img


def describe_frame(frame: SceneFrame) -> list[str]:
    """Human-readable chain origins and spotlight parameters."""
    lines = ["Chain frames (world origin):"]
    for name, _ in frame.pose:
        x, y, z = frame.pose.world_position(name)
        lines.append(f"  {name:12s} ({x:8.4f}, {y:8.4f}, {z:8.4f})")
    spot = frame.spotlight
    if spot is None:
        lines.append("Spotlight: OFF")
    else:
        lines.append("Spotlight: ON")
        lines.append("  position  ({:.4f}, {:.4f}, {:.4f})".format(*spot.position))
        lines.append("  direction ({:.4f}, {:.4f}, {:.4f})".format(*spot.direction))
        lines.append(f"  cutoff {spot.cutoff_deg:.1f} deg, exponent {spot.exponent:.1f}")
    return lines


def build_state(config: LampConfig, args: argparse.Namespace) -> JointState:
    state = config.make_state()
    overrides = {
        "base_rotation": args.base,
        "lower_arm_angle": args.lower,
        "upper_arm_angle": args.upper,
        "lampshade_tilt": args.tilt,
        "lampshade_spin": args.spin,
    }
    for name, value in overrides.items():
        if value is not None:
            state.set_angle(name, value)
    state.select_joint(args.joint)
    if args.no_spotlight:
        state.spotlight_enabled = False
    return state


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a lamp pose to PNG")
    parser.add_argument("--base", type=float, help="base rotation (deg)")
    parser.add_argument("--lower", type=float, help="lower arm angle (deg)")
    parser.add_argument("--upper", type=float, help="upper arm angle (deg)")
    parser.add_argument("--tilt", type=float, help="lampshade tilt (deg)")
    parser.add_argument("--spin", type=float, help="lampshade spin (deg)")
    parser.add_argument("--joint", type=int, default=1, help="selected joint 1-4")
    parser.add_argument("--no-spotlight", action="store_true")
    parser.add_argument("--config", type=Path, default=None, help="lamp.json to load")
    parser.add_argument("--azimuth", type=float, default=20.0)
    parser.add_argument("--elevation", type=float, default=30.0)
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=800)
    parser.add_argument("--output", type=Path, default=Path("results/pose_snapshot.png"))
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    config = load_lamp_config(args.config) if args.config else LampConfig()
    assembler = SceneAssembler(config.dimensions, config.spotlight)
    frame = assembler.assemble(build_state(config, args))

    for line in describe_frame(frame):
        print(line)
    render_frame(
        frame,
        azimuth=args.azimuth, elevation=args.elevation,
        width=args.width, height=args.height,
        output_path=args.output,
    )
    print(f"Saved {args.output}")


if __name__ == "__main__":
    main()
