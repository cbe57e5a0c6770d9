"""
TechMatch Main Entry Point

Initializes logging and configuration, then serves the matching
handler with uvicorn.
"""

import sys


def main() -> int:
    """
    Main entry point for the TechMatch server.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        from techmatch.utils.logger import log, setup_logging

        setup_logging()
        log.info("Starting TechMatch matching service...")

        from techmatch.utils.config import get_settings

        settings = get_settings()
        log.info(f"Environment: {settings.environment}")
        log.info(f"Debug mode: {settings.debug}")

        log.info("Checking database connection...")
        from techmatch.data.database import get_database_manager

        if get_database_manager().check_sync_connection():
            log.info("Database connection established")
        else:
            log.warning(
                "Could not connect to MongoDB. "
                "Matching requests will fail until the database is reachable."
            )

        import uvicorn

        uvicorn.run(
            "techmatch.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level=settings.logging.level.lower(),
        )
        return 0

    except KeyboardInterrupt:
        print("\nServer interrupted by user.")
        return 130
    except Exception as e:
        print(f"Fatal error: {e}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
