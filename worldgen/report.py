"""Plain-text listing of a generated system tree."""

from __future__ import annotations

from .constants import CONTACT_ORBIT, FAR_ORBIT, PRIMARY_ORBIT
from .diagnostics import Diagnostics
from .models.system import EmptyOrbit, StarSystem, survey
from .models.world import GasGiant, World

_INDENT = "    "


def _star_orbit_label(system: StarSystem) -> str:
    if system.orbit == PRIMARY_ORBIT:
        return "Primary"
    if system.orbit == CONTACT_ORBIT:
        return "Contact"
    if system.orbit == FAR_ORBIT:
        return "Far"
    return f"Orbit {system.orbit}"


def _world_line(orbit: int, world: World) -> str:
    line = f"{orbit:<7}{world.name:<24}{world.to_upp():<12}{world.trade_classes_string():<18}"
    extras = [text for text in (world.facilities_string(), world.astro_description()) if text]
    if world.is_main_world:
        extras.insert(0, "Main World")
    if extras:
        line += "  " + " | ".join(extras)
    return line.rstrip()


def _body_lines(orbit: int, body: World | GasGiant, depth: int) -> list[str]:
    indent = _INDENT * depth
    if isinstance(body, GasGiant):
        lines = [f"{indent}{orbit:<7}{body.name:<24}{body.size.code}"]
    else:
        lines = [indent + _world_line(orbit, body)]
    for satellite in body.satellites:
        lines.append(indent + _INDENT + _world_line(satellite.orbit, satellite))
    return lines


def render_system(system: StarSystem, show_empty: bool = False, depth: int = 0) -> list[str]:
    """Lines for ``system`` and its companions, one body per line."""
    indent = _INDENT * depth
    lines = [f"{indent}{system.name}: {system.star} ({_star_orbit_label(system)})"]
    for orbit, content in enumerate(system.orbits(show_empty)):
        if content is None:
            continue
        if isinstance(content, EmptyOrbit):
            lines.append(f"{indent}{_INDENT}{orbit:<7}Empty")
        elif isinstance(content, StarSystem):
            lines.append(f"{indent}{_INDENT}{orbit:<7}{content.name} ({content.star})")
        else:
            lines.extend(_body_lines(orbit, content, depth + 1))
    for companion in system.companions():
        lines.extend(render_system(companion, show_empty, depth + 1))
    return lines


def render_report(
    system: StarSystem,
    diagnostics: Diagnostics | None = None,
    show_empty: bool = False,
) -> str:
    """Full text report: the tree, a body count and any warnings."""
    counts = survey(system)
    lines = render_system(system, show_empty)
    lines.append("")
    lines.append(
        f"{counts.stars} star(s), {counts.worlds} world(s), {counts.gas_giants} gas giant(s), "
        f"{counts.planetoid_belts} belt(s), {counts.satellites} satellite(s)"
    )
    if diagnostics is not None and len(diagnostics):
        lines.append("")
        for entry in diagnostics:
            lines.append(f"[{entry.severity.value}] {entry.category.value}: {entry.message}")
    return "\n".join(lines)
