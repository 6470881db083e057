"""Display-independent image viewer and wallpaper logic: constants, helpers, placement geometry, background scripts, Enlightenment IPC framing, viewport maths and window bookkeeping."""

__version__ = "0.1.0"
__all__ = ["constants", "utils", "geometry", "bgscript", "enlipc", "viewport", "windows"]