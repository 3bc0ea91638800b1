#!/usr/bin/env python3
"""MiniHub CLI - run the web server or seed sample data."""
import argparse
import logging


def setup_logging(log_level: str):
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def cmd_serve(args):
    """Start the web server."""
    from minihub.app import create_app
    from minihub.config import Config

    setup_logging(args.log_level)

    host = args.host or '0.0.0.0'
    port = args.port or Config.PORT
    debug = args.debug if args.debug is not None else Config.DEBUG

    overrides = {}
    if args.data_path:
        overrides['DATA_PATH'] = args.data_path
    app = create_app(overrides)

    logger = logging.getLogger(__name__)
    logger.info(f"MiniHub running at http://{host}:{port} (data: {app.config['DATA_PATH']})")

    # The reloader would start a second process with its own copy of the dataset
    app.run(debug=debug, host=host, port=port, use_reloader=False)


def cmd_seed(args):
    """Create a sample repository."""
    from minihub.config import Config
    from minihub.core import Hub
    from minihub.seed import seed_data
    from minihub.storage import JsonFileStorage

    setup_logging(args.log_level)

    seed_data(Hub(JsonFileStorage(args.data_path or Config.DATA_PATH)))


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='MiniHub - repositories, files and commit history in a JSON file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the server on the default port (PORT or 3000)
  %(prog)s serve

  # Use another data file and port
  %(prog)s serve --data-path /tmp/minihub.json --port 8080

  # Add a demo repository
  %(prog)s seed
"""
    )

    # Global options
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Set the logging level (default: INFO)'
    )

    # Create subparsers for commands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        required=True
    )

    serve_parser = subparsers.add_parser(
        'serve',
        help='Start the web server',
        description='Start the MiniHub web server'
    )
    serve_parser.add_argument(
        '--host',
        help='Host to bind to (default: 0.0.0.0)'
    )
    serve_parser.add_argument(
        '--port',
        type=int,
        help='Port to bind to (default: from config)'
    )
    serve_parser.add_argument(
        '--data-path',
        help='JSON data file (default: from config)'
    )
    serve_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )
    serve_parser.add_argument(
        '--no-debug',
        dest='debug',
        action='store_false',
        help='Disable debug mode'
    )
    serve_parser.set_defaults(func=cmd_serve, debug=None)

    seed_parser = subparsers.add_parser(
        'seed',
        help='Add a sample repository',
        description='Add a sample repository with a few commits to the data file'
    )
    seed_parser.add_argument(
        '--data-path',
        help='JSON data file (default: from config)'
    )
    seed_parser.set_defaults(func=cmd_seed)

    # Parse arguments
    args = parser.parse_args(argv)

    # Execute the command
    args.func(args)


if __name__ == '__main__':
    main()
