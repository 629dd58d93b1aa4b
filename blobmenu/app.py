"""
Application entry point — CLI parsing, dependency checks, Qt launch.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__


def _check_deps() -> list:
    missing = []
    try:
        import numpy  # noqa: F401
    except ImportError:
        missing.append("numpy")
    try:
        import PyQt5  # noqa: F401
    except ImportError:
        missing.append("PyQt5")
    return missing


def _parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="blobmenu",
        description="Blob Menu — radial menu with metaball connectors.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s                          # 6 items, black ink\n"
            "  %(prog)s --items 8 --scheme blue  # 8 items, cosmic blue\n"
            "  %(prog)s --max-distance 200       # shorter reach\n"
            "  %(prog)s --list-schemes           # show available colour schemes\n"
            "  %(prog)s -v                       # verbose logging\n"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--items", type=int, default=6, help="Number of demo items (2–12, default 6)")
    p.add_argument("--item-radius", type=float, default=40.0, help="Item radius in pixels")
    p.add_argument("--scheme", type=str, default="mono", help="Colour scheme")
    p.add_argument("--max-distance", type=float, default=300.0, help="Connector reach in pixels")
    p.add_argument("--handle-rate", type=float, default=2.4, help="Connector handle length rate")
    p.add_argument("--pointer-radius", type=float, default=50.0, help="Pointer radius in pixels")
    p.add_argument("--list-schemes", action="store_true", help="List colour schemes and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _fail(msg: str) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


def main(argv=None) -> None:
    args = _parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger("blobmenu")

    # Dependency check
    missing = _check_deps()
    if missing:
        print(f"ERROR: Missing packages: {', '.join(missing)}\n"
              f"Install: pip install {' '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    from .palettes import SCHEMES, list_schemes

    # List schemes
    if args.list_schemes:
        from .palettes import to_hex
        print("Available colour schemes:")
        for key in list_schemes():
            s = SCHEMES[key]
            print(f"  {key:12s}  {s.name:14s}  item={to_hex(s.item)}  pointer={to_hex(s.pointer)}")
        sys.exit(0)

    # Validate
    if not (2 <= args.items <= 12):
        _fail("--items must be 2–12.")
    if args.item_radius <= 0:
        _fail("--item-radius must be > 0.")
    if args.scheme not in SCHEMES:
        _fail(f"Unknown scheme '{args.scheme}'. Available: {', '.join(list_schemes())}")

    from .config import ConfigError
    from .palettes import get_scheme, scheme_config

    scheme = get_scheme(args.scheme)
    try:
        config = scheme_config(
            scheme,
            max_distance=args.max_distance,
            handle_len_rate=args.handle_rate,
            pointer_radius=args.pointer_radius,
        )
    except ConfigError as e:
        _fail(str(e))

    # Launch
    logger.info("Starting Blob Menu v%s", __version__)
    logger.info("Items: %d, Scheme: %s, Max distance: %g",
                args.items, args.scheme, config.max_distance)

    from PyQt5.QtWidgets import QApplication
    from .main_window import MainWindow
    from .menu import demo_items

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("Blob Menu")
    app.setApplicationVersion(__version__)

    window = MainWindow(demo_items(args.items, radius=args.item_radius), config, scheme)
    window.resize(1000, 700)
    window.show()

    sys.exit(app.exec_())
