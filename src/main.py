"""
Main Application Entry Point
===========================

Runs the AI code generator HTTP service with the Flask development server.
"""

import os
import sys
from pathlib import Path

# Configure centralized logging
from codegen.utils.logging_config import setup_application_logging

logger = setup_application_logging()


def main():
    """Main application entry point."""

    # Add src directory to path (current directory)
    src_dir = Path(__file__).parent
    sys.path.insert(0, str(src_dir))

    # Import after path setup
    from codegen.factory import create_app

    # Get configuration from environment
    config_name = os.environ.get('FLASK_ENV', 'development')
    port = int(os.environ.get('PORT', 3001))
    host = os.environ.get('HOST', '0.0.0.0')
    debug = os.environ.get('DEBUG', 'true').lower() == 'true'

    logger.info(f"Starting AI Code Generator in {config_name} mode")
    logger.info(f"Server will run on {host}:{port}")

    try:
        app = create_app(config_name)
    except Exception as e:
        logger.error(f"Failed to create Flask application: {e}")
        return 1

    remote = app.extensions['generation_service'].remote_enabled
    print(f"""
+------------------------------------------------------------------+
| AI Code Generator                                                |
+------------------------------------------------------------------+
| Environment: {config_name:<20} Debug: {str(debug):<5}                  |
| Host: {host:<26} Port: {port:<10}                |
| Remote generation: {('enabled' if remote else 'disabled (templates)'):<46}|
|                                                                  |
| API Endpoints:                                                   |
|  POST /api/generate          - Generate code                     |
|  GET  /api/languages         - Selectable languages              |
|  GET  /api/health            - Health check                      |
|  POST /api/analyze           - Rank languages for a prompt       |
|  POST /api/enhance           - Add a language directive          |
|  GET  /api/history           - Generation history                |
+------------------------------------------------------------------+
""")

    try:
        app.run(
            host=host,
            port=port,
            debug=debug,
            use_reloader=False
        )
    except KeyboardInterrupt:
        logger.info("Application shutdown requested by user")
        return 0
    except Exception as e:
        logger.error(f"Application failed to start: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
