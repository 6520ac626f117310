"""CLI entry point for dietscan."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .camera import BarcodeCamera
from .config import DietScanConfig, load_config
from .lookup import ProductLookupService
from .presenter import ProductPresenter
from .session import ScanSessionController


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dietscan",
        description="Look up a food product by barcode and check whether it "
        "is vegan, vegetarian and halal.",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity. Use -vv for debug output.",
    )

    sub = parser.add_subparsers(dest="command")

    # cameras
    sub.add_parser("cameras", help="List available cameras")

    # lookup
    lookup_parser = sub.add_parser("lookup", help="Look up a barcode entered manually")
    lookup_parser.add_argument("barcode", type=str, help="Numeric barcode")
    lookup_parser.add_argument("--json", action="store_true", help="Output JSON")

    # scan
    scan_parser = sub.add_parser("scan", help="Scan a barcode with the camera")
    scan_parser.add_argument(
        "--camera", type=int, default=None, help="Camera index to use"
    )
    scan_parser.add_argument("--json", action="store_true", help="Output JSON")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    config = load_config(args.config)

    match args.command:
        case "cameras":
            _cmd_cameras()
        case "lookup":
            ok = asyncio.run(_cmd_lookup(config, args))
            if not ok:
                sys.exit(1)
        case "scan":
            ok = asyncio.run(_cmd_scan(config, args))
            if not ok:
                sys.exit(1)


def setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _cmd_cameras() -> None:
    cameras = BarcodeCamera.list_cameras()
    if not cameras:
        print("No cameras found.")
        return
    print(f"Available cameras: {len(cameras)}")
    for idx in cameras:
        print(f"  camera {idx}")


async def _cmd_lookup(config: DietScanConfig, args) -> bool:
    async with ProductLookupService.from_config(config.catalog) as service:
        presenter = ProductPresenter(service.lookup)
        await presenter.submit(args.barcode)

    return _show(presenter, args.json)


async def _cmd_scan(config: DietScanConfig, args) -> bool:
    if args.camera is not None:
        config.scanner.camera_index = args.camera

    camera = BarcodeCamera()
    async with ProductLookupService.from_config(config.catalog) as service:
        presenter = ProductPresenter(service.lookup)
        controller = ScanSessionController(camera, presenter.submit, config.scanner)

        print("Point the camera at a barcode (Ctrl+C to cancel)...", file=sys.stderr)
        try:
            async with controller.session():
                while controller.scanning:
                    await asyncio.sleep(0.1)
        except RuntimeError as e:
            print(str(e), file=sys.stderr)
            return False
        finally:
            await camera.wait_closed()

        await controller.wait_for_lookup()

    return _show(presenter, args.json)


def _show(presenter: ProductPresenter, as_json: bool) -> bool:
    if presenter.error:
        print(presenter.error, file=sys.stderr)
        return False

    report = presenter.product
    if report is None:
        return False

    if as_json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(report.render())
    return True
