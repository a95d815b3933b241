from .surface import DisplayState, DisplaySurface
from .terminal import TerminalSurface

__all__ = ["DisplayState", "DisplaySurface", "TerminalSurface"]
