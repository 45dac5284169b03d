"""
Console entry point: bind ``MyAppSettings`` into the container and print it.
"""

import sys

from .config.binder import add_app_settings
from .config.settings import MyAppSettings, load_host_settings
from .core.exceptions import AppSettingsError
from .core.host import create_default_builder
from .observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Build the host, resolve the settings and print them."""
    print("Add App Settings to Dependency Injection Demo")

    host_settings = load_host_settings()
    setup_logging(host_settings.log_level)

    host = (
        create_default_builder(host_settings)
        .configure_services(
            lambda services, config: add_app_settings(services, MyAppSettings, config)
        )
        .build()
    )

    settings = host.services.resolve(MyAppSettings)

    print("\nMy App Settings:")
    print(f"String Setting: {settings.StringSetting}")
    print(f"Int Setting: {settings.IntSetting}")
    print(f"Bool Setting: {settings.BoolSetting}")


def cli_main():
    """CLI entry point."""
    try:
        main()
        sys.exit(0)
    except AppSettingsError as e:
        logger.error(f"Startup failed: {e}", error_code=e.error_code)
        print(f"Startup failed: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected startup failure: {e}")
        print(f"Startup failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
