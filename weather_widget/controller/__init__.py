from .controller import WidgetController
from .timer import RefreshTimer

__all__ = ["RefreshTimer", "WidgetController"]
