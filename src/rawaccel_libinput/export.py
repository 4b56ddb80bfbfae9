"""Text artifacts consumed by libinput, X11 and Hyprland.

Every number is written with three decimals; downstream tooling parses these
strings, so the layouts below are fixed.
"""

from __future__ import annotations

from typing import Iterable

from .sampling import LibinputTable

DECIMALS = 3

ARTIFACT_FILENAMES = {
    "values": "libinput_values.txt",
    "command": "libinput_command.sh",
    "xorg": "50-mouse-accel.conf",
    "hyprland": "hyprland.conf",
}


def format_number(value: float, decimals: int = DECIMALS) -> str:
    return f"{value:.{decimals}f}"


def format_values(values: Iterable[float], decimals: int = DECIMALS, separator: str = ",") -> str:
    """Join values formatted to ``decimals`` places, e.g. ``0.000,1.052``."""
    return separator.join(format_number(float(v), decimals) for v in values)


def libinput_command(table: LibinputTable, decimals: int = DECIMALS) -> str:
    return (
        "libinput debug-events "
        f'--set-custom-accel-function-fallback="{format_values(table.values, decimals)}" '
        f"--set-custom-accel-function-step={format_number(table.step, decimals)}"
    )


def xorg_config(table: LibinputTable, decimals: int = DECIMALS) -> str:
    """InputClass stanza for ``/etc/X11/xorg.conf.d/50-mouse-accel.conf``."""
    return "\n".join(
        [
            "# libinput custom acceleration configuration",
            "# Add this to your input configuration file",
            "",
            'Section "InputClass"',
            '    Identifier "Mouse Accel"',
            '    MatchIsPointer "on"',
            '    Option "AccelProfile" "custom"',
            f'    Option "AccelPointsFallback" "{format_values(table.values, decimals)}"',
            f'    Option "AccelStep" "{format_number(table.step, decimals)}"',
            "EndSection",
        ]
    )


def hyprland_config(table: LibinputTable, decimals: int = DECIMALS) -> str:
    """hyprland.conf snippet that runs the libinput command at startup."""
    return "\n".join(
        [
            "# Hyprland configuration",
            "# Add this to your hyprland.conf",
            "",
            "input {",
            "    accel_profile = custom",
            "    # Note: Hyprland doesn't directly support libinput custom acceleration",
            "    # You may need to set this via libinput tools or xinput",
            "}",
            "",
            "# Alternative: Use libinput command in startup",
            f"exec-once = {libinput_command(table, decimals)}",
        ]
    )


def values_summary(table: LibinputTable, decimals: int = DECIMALS) -> str:
    return "\n".join(
        [
            f"Step: {format_number(table.step, decimals)}",
            f"Values: [{format_values(table.values, decimals, separator=', ')}]",
        ]
    )


def render_all(table: LibinputTable, decimals: int = DECIMALS) -> dict[str, str]:
    """Render every artifact, keyed like :data:`ARTIFACT_FILENAMES`."""
    return {
        "values": values_summary(table, decimals),
        "command": libinput_command(table, decimals),
        "xorg": xorg_config(table, decimals),
        "hyprland": hyprland_config(table, decimals),
    }
