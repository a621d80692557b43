"""Frame-driven rail shooter logic: vector math, shake, timers, sky scrolling, camera, texture slots, spawn scripts and screen flow."""

__version__ = "0.1.0"
__all__ = [
    "vecmath",
    "shake",
    "timed_call",
    "skydome",
    "rail_camera",
    "slots",
    "enemy_script",
    "flow",
]