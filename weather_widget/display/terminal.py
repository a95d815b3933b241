import click

from weather_widget.display.surface import DisplayState, DisplaySurface

LOADING_MESSAGE = "Loading weather..."
ERROR_MESSAGE = "Unable to load weather data"


class TerminalSurface(DisplaySurface):
    """Echoes the visible region to the terminal on every state change"""

    def __init__(self, clear_screen: bool = False):
        super().__init__()
        self.clear_screen = clear_screen

    def _on_state_changed(self, state: DisplayState) -> None:
        if self.clear_screen:
            click.clear()

        match state:
            case DisplayState.LOADING:
                click.echo(click.style(LOADING_MESSAGE, fg="bright_black", italic=True))
            case DisplayState.CONTENT:
                self._echo_panel()
            case DisplayState.ERROR:
                click.echo(click.style(f"⚠️  {ERROR_MESSAGE}", fg="red", bold=True), err=True)

    def _echo_panel(self) -> None:
        view = self.view
        if view is None:
            return

        click.echo(click.style(view.location, fg="cyan", bold=True))
        click.echo(click.style(view.updated_at, fg="bright_black"))
        click.echo()
        click.echo(
            click.style(view.temperature, fg="bright_yellow", bold=True)
            + f"  {view.icon} {view.description}"
        )
        click.echo()
        click.echo(f"Humidity: {view.humidity}")
        click.echo(f"Wind: {view.wind}")
