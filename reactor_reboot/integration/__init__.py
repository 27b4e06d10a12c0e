"""
Text loading and run configuration for the reactor reboot engine
"""

from .parsing import (
    format_reboot_step,
    iter_reboot_steps,
    load_reboot_steps,
    parse_cuboid,
    parse_reboot_step,
    parse_reboot_steps,
)

__all__ = [
    "format_reboot_step",
    "iter_reboot_steps",
    "load_reboot_steps",
    "parse_cuboid",
    "parse_reboot_step",
    "parse_reboot_steps",
]
