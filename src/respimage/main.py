"""Command line entry point for respimage."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .config import ConfigLoader, ImageConfig
from .errors import RespImageError
from .layout import Layout, Loading
from .resolver import AttributeResolver, LayoutArgs
from .sources import LocalImageSource

logger = logging.getLogger(__name__)


def _parse_img_style(declarations: list[str] | None) -> dict[str, str]:
    """Parse ``prop:value`` pairs into an ordered style dict."""
    style: dict[str, str] = {}
    for declaration in declarations or []:
        prop, sep, value = declaration.partition(":")
        if not sep or not prop.strip():
            raise argparse.ArgumentTypeError(f"Invalid style declaration: {declaration!r}")
        style[prop.strip()] = value.strip()
    return style


def _load_config(path: str | None) -> ImageConfig:
    """Load defaults from --config, or from the bundled config when present."""
    loader = ConfigLoader()
    if path is not None:
        return loader.load_file(path)
    try:
        return loader.load()
    except FileNotFoundError:
        logger.debug("No image config found, using built-in defaults")
        return ImageConfig()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="respimage - Resolve responsive image attributes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", type=Path, help="Image file to describe")
    parser.add_argument("--url", required=True, help="Public URL of the image")
    parser.add_argument("--alt", default="", help="Alternative text")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in Layout],
        default=Layout.FULL_WIDTH.value,
        help="Layout mode (default: fullWidth)",
    )
    parser.add_argument(
        "--loading",
        choices=[loading.value for loading in Loading],
        default=Loading.LAZY.value,
        help="Loading strategy (default: lazy)",
    )
    parser.add_argument("--width", type=float, help="Display width in pixels")
    parser.add_argument("--height", type=float, help="Display height in pixels")
    parser.add_argument("--sizes", help="Sizes attribute override")
    parser.add_argument("--background-color", help="Background color (default: from config)")
    parser.add_argument(
        "--no-lqip",
        dest="lqip",
        action="store_const",
        const=False,
        default=None,
        help="Do not request a placeholder image",
    )
    parser.add_argument("--class", dest="wrapper_class", help="Extra wrapper class")
    parser.add_argument(
        "--img-style",
        metavar="PROP:VALUE",
        nargs="*",
        help="CSS overrides for the image layers",
    )
    parser.add_argument("--config", metavar="PATH", help="Image config YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Resolve an image file and print the view as YAML."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        img_style = _parse_img_style(args.img_style)
        resolver = AttributeResolver(_load_config(args.config))
        source = LocalImageSource(args.image, url=args.url, alt=args.alt)
        view = resolver.resolve(
            source,
            LayoutArgs(
                layout=args.layout,
                loading=args.loading,
                width=args.width,
                height=args.height,
                sizes=args.sizes,
                background_color=args.background_color,
                lqip=args.lqip,
                img_style=img_style,
                wrapper_class=args.wrapper_class,
            ),
        )
    except (RespImageError, FileNotFoundError, argparse.ArgumentTypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(yaml.safe_dump(view.to_dict(), sort_keys=False), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
