#!/usr/bin/env python3
"""
Main entry point for the Helpful Tools application.
This file serves as the application launcher that imports and runs the Flask app from the src directory.
"""

import sys
import os
import argparse
from pathlib import Path

# Add the src directory to the Python path so we can import from it
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from main import app

DEFAULT_PORT = 8000


def get_config_directory():
    """Get the config directory path."""
    config_dir = os.environ.get('HELPFUL_TOOLS_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/helpful-tools
    return Path.home() / '.config' / 'helpful-tools'


def get_default_port():
    """Port from HELPFUL_TOOLS_PORT, else 8000."""
    try:
        return int(os.environ.get('HELPFUL_TOOLS_PORT', DEFAULT_PORT))
    except ValueError:
        return DEFAULT_PORT


def write_port_file(port):
    """Write the port number to .port file for other processes to read."""
    config_dir = get_config_directory()
    config_dir.mkdir(parents=True, exist_ok=True)
    port_file = config_dir / ".port"
    port_file.write_text(str(port))
    print(f"Port {port} written to {port_file}")


def cleanup_port_file():
    """Remove the .port file on shutdown."""
    port_file = get_config_directory() / ".port"
    if port_file.exists():
        port_file.unlink()
        print("Port file cleaned up")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Helpful Tools Server')
    parser.add_argument('--port', '-p', type=int, default=get_default_port(),
                        help=f'Port to run the server on (default: {DEFAULT_PORT})')
    parser.add_argument('--host', default='127.0.0.1',
                        help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--debug', action='store_true',
                        help='Run Flask in debug mode')
    return parser.parse_args(argv)


if __name__ == '__main__':
    args = parse_args()

    # Change working directory to project root to ensure relative paths work correctly
    os.chdir(project_root)

    write_port_file(args.port)

    try:
        print(f"Starting Helpful Tools on http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    finally:
        cleanup_port_file()
