"""
CLI script to open a corpus in the Book Search web interface.

Usage:
    python scripts/run_app.py                               # Configured data directory
    python scripts/run_app.py --corpus data/twenty_leagues.json
    python scripts/run_app.py --config path/to/config.json --port 8502
"""

import argparse
import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from book_search.core import get_config, ConfigurationError  # noqa: E402
from book_search.core.config_loader import reload_config  # noqa: E402

APP_PATH = Path(__file__).parent.parent / "book_search" / "gui" / "app.py"


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Browse a corpus of scanned books in the browser"
    )

    parser.add_argument(
        "--corpus",
        type=str,
        help="JSON corpus file, scanned PDF, or directory to pre-fill (default: configured data directory)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument("--port", type=int, default=8501, help="Server port (default: 8501)")
    parser.add_argument("--host", type=str, default="localhost", help="Bind address (default: localhost)")
    parser.add_argument("--no-browser", action="store_true", help="Run headless")

    return parser.parse_args(argv)


def build_command(args, corpus: Path, config_path: Path = None) -> list:
    """Assemble the streamlit invocation, forwarding app options after "--"."""
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(APP_PATH),
        "--server.port", str(args.port),
        "--server.address", args.host,
    ]

    if args.no_browser:
        cmd.extend(["--server.headless", "true"])

    cmd.extend(["--", "--corpus", str(corpus)])
    if config_path is not None:
        cmd.extend(["--config", str(config_path.resolve())])

    return cmd


def main(argv=None) -> int:
    """Main entry point for launching the app."""
    args = parse_args(argv)

    config_path = Path(args.config) if args.config else None

    try:
        config = reload_config(config_path) if config_path else get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        return 1

    corpus = Path(args.corpus) if args.corpus else config.paths.data_directory
    if not corpus.exists():
        print(f"Error: Corpus not found: {corpus}")
        return 1

    print(f"{config.gui.page_title}: {corpus.resolve()}")
    print(f"Serving on http://{args.host}:{args.port} (Ctrl+C to stop)")

    try:
        subprocess.run(build_command(args, corpus.resolve(), config_path), cwd=str(config.project_root))
    except KeyboardInterrupt:
        print("\nShutting down...")
    except FileNotFoundError:
        print("Error: Streamlit not found. Install with: pip install streamlit")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
