"""
Web server for computing rounds and resolving player links over HTTP.
Run this separately from main.py when admin or player devices talk JSON.
"""

import argparse
import os

from dotenv import load_dotenv

from impostor_words.config import load_theme_catalog
from impostor_words.config.room_config import DEFAULT_BASE_URL
from impostor_words.web import RoundServer

load_dotenv()


def main():
    """Entry point for the round server."""
    parser = argparse.ArgumentParser(
        description="Start the round server for admin and player endpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python server.py                                  # Start server on default port 5000
  python server.py --port 8080                      # Start server on port 8080
  python server.py --base-url https://example.org/  # Player links point elsewhere
        """
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=5000,
        help="Port for web server (default: 5000)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default='127.0.0.1',
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Base URL for player links (default: $IMPOSTOR_WORDS_BASE_URL or the local server)"
    )
    parser.add_argument(
        "--themes",
        type=str,
        default=None,
        help="Path to a custom theme catalog YAML"
    )
    
    args = parser.parse_args()
    base_url = args.base_url or os.getenv("IMPOSTOR_WORDS_BASE_URL", DEFAULT_BASE_URL)
    
    server = RoundServer(port=args.port, host=args.host, base_url=base_url,
                         catalog=load_theme_catalog(args.themes))
    server.start()


if __name__ == "__main__":
    main()
