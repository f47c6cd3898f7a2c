"""
Schema Form Web App Entry Point.

Launch the Gradio form generator.

Usage:
    # Default host/port from configuration
    python run_form_app.py

    # Custom port, start with a schema file loaded into the editor
    python run_form_app.py --port 7861 --schema examples/contact_schema.json

    # Use environment variables
    SCHEMA_FORM_SERVER_PORT=7861 SCHEMA_FORM_SUBMIT_DELAY=0.2 python run_form_app.py
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from schema_form.config import get_config
from schema_form.errors import SchemaFormError
from schema_form.exporting import read_schema_file
from schema_form.ui import build_app


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Schema Form Web App",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_form_app.py
  python run_form_app.py --port 7861
  python run_form_app.py --schema examples/contact_schema.json

Environment Variables:
  SCHEMA_FORM_SERVER_NAME      Host to bind (default: 0.0.0.0)
  SCHEMA_FORM_SERVER_PORT      Port to bind (default: 7860)
  SCHEMA_FORM_SUBMIT_DELAY     Simulated submit delay in seconds (default: 1.0)
  SCHEMA_FORM_DARK_MODE        Start in dark mode: true/false (default: false)
  SCHEMA_FORM_LOG_LEVEL        Logging level (default: INFO)
        """,
    )

    parser.add_argument(
        "--host",
        default=config.server_name,
        help=f"Host to bind (default: {config.server_name})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.server_port,
        help=f"Port to bind (default: {config.server_port})",
    )

    parser.add_argument(
        "--schema",
        default=None,
        help="Schema file to preload into the editor",
    )

    args = parser.parse_args()

    logging.basicConfig(level=config.log_level)
    logger = logging.getLogger("schema-form")

    initial_schema = ""
    if args.schema:
        try:
            initial_schema = read_schema_file(args.schema)
        except SchemaFormError as e:
            logger.error(str(e))
            sys.exit(1)

    print("=" * 60)
    print("Schema Form")
    print("=" * 60)
    print(f"Host: {args.host}")
    print(f"Port: {args.port}")
    print(f"Submit delay: {config.submit_delay_seconds}s")
    print("=" * 60)

    try:
        build_app(initial_schema).launch(server_name=args.host, server_port=args.port)
    except KeyboardInterrupt:
        print("\nServer stopped.")


if __name__ == "__main__":
    main()
