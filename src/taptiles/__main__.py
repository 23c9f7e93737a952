"""Entry point for `python -m taptiles` or the `taptiles` console script."""

import argparse
import logging

from taptiles.app import App


def main() -> None:
    parser = argparse.ArgumentParser(description="Tap Tiles - press the lane key as each tile reaches the bottom")
    parser.add_argument("--sheets-dir", default="", help="Directory containing note sheet files")
    parser.add_argument("--sheet", default=None, help="Note sheet to load at startup")
    parser.add_argument("--soundfont", default=None, help="SoundFont (.sf2) used for note playback")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = App(sheets_dir=args.sheets_dir, sheet_path=args.sheet, soundfont_path=args.soundfont)
    app.run()


if __name__ == "__main__":
    main()
