"""Image viewer and wallpaper logic: window zoom and geometry, background layouts, restore scripts and Enlightenment IPC framing."""

__version__ = "0.1.0"

__all__ = ["enl_ipc", "geometry", "registry", "utils", "wallpaper", "window"]