"""
Mahoot Server - Main Entry Point

This is the main entry point for the Mahoot backend server.
It loads the user store and starts the Flask application.
"""

from mahoot import create_app
from mahoot.config import Config
from mahoot.services.user_service import get_user_service
from mahoot.utils.server_logger import server_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        app = create_app(Config)
        user_service = get_user_service()
        print(f"✓ User store loaded from {Config.USERS_FILE} ({user_service.user_count()} users)")
        print(f"✓ Password hash scheme: {Config.PASSWORD_HASH_SCHEME}")

        server_logger.logger.info(f"Mahoot Server starting on {Config.HOST}:{Config.PORT}")

        print(f"\nStarting Mahoot Backend Server on http://{Config.HOST}:{Config.PORT}")
        print(f"Health check: http://{Config.HOST}:{Config.PORT}/api/health")
        print(f"User data: {Config.USERS_FILE}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        server_logger.logger.info("Mahoot Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        server_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
