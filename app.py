from catalog_browser.logging_config import configure_logging
from catalog_browser.ui.dash_app import create_dash_app
from catalog_browser.ui.server import ServerSettings

configure_logging()

settings = ServerSettings.from_env()
app = create_dash_app(settings.config_root)
server = app.server


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.resolve_port(), debug=settings.debug)
