"""Lightweight launcher for the Chaldean clock.

Stays small and delegates to `src.chaldean_clock.app`.
"""
import argparse
import logging
from pathlib import Path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Chaldean clock launcher")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--config", type=Path, default=None, help="JSON file of clock parameters")
    parser.add_argument("--script", type=Path, default=None, help="command script run at session start")
    parser.add_argument("--save-slot", type=int, default=1)
    parser.add_argument("--load", action="store_true", help="restore the save slot at startup")
    parser.add_argument("--frames", type=int, default=None, help="exit after this many frames")
    parser.add_argument("--log-file", type=Path, default=None)
    args = parser.parse_args(argv)

    logger = logging.getLogger("chaldean_clock.launcher")
    repo_root = Path(__file__).parent
    try:
        # Defer import; this gives clearer errors if src/ is broken
        from src.chaldean_clock.app import Application

        app = Application(
            config_path=args.config,
            data_dir=repo_root / "data",
            debug=args.debug,
            save_slot=args.save_slot,
            script_path=args.script,
            load_on_start=args.load,
            log_file=args.log_file,
        )
        app.run(frames=args.frames)
    except Exception as e:
        logger.exception("Failed to start application: %s", e)
        raise


if __name__ == "__main__":
    main()
