"""Convenience entrypoint for the clock package.

Use `from src.chaldean_clock.main import run` to construct and run the
Application defined in `src.chaldean_clock.app`. Accepts the same options
as `run_game.py`.
"""
from pathlib import Path
from typing import Optional


def run(
    config_path: Optional[Path] = None,
    data_dir: Optional[Path] = None,
    debug: bool = False,
    save_slot: int = 1,
    script_path: Optional[Path] = None,
    load_on_start: bool = False,
    log_file: Optional[Path] = None,
    frames: Optional[int] = None,
):
    from src.chaldean_clock.app import Application

    app = Application(
        config_path=config_path,
        data_dir=data_dir,
        debug=debug,
        save_slot=save_slot,
        script_path=script_path,
        load_on_start=load_on_start,
        log_file=log_file,
    )
    app.run(frames=frames)


if __name__ == "__main__":
    run()
