# filename: huffman_cli.py

import argparse
import logging
import sys

from bit_streams import BitInputStream, BitOutputStream
from huffman_config import HuffConfig
from huffman_service import HuffProcessor

logger = logging.getLogger("huffproc")


def build_parser():
    parser = argparse.ArgumentParser(prog="huffproc", description="Huffman tree-header compressor")
    parser.add_argument(
        "--debug",
        type=int,
        default=None,
        help="Diagnostic level (default: $HUFF_DEBUG or 0)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, verb in (("compress", "Compress"), ("decompress", "Decompress")):
        cmd = sub.add_parser(name, help=f"{verb} SRC into DST")
        cmd.add_argument("src", help="Input file")
        cmd.add_argument("dst", help="Output file")
    return parser


def run(command, src, dst, config):
    processor = HuffProcessor(config)
    with BitInputStream.from_path(src) as bit_in, BitOutputStream.from_path(dst) as bit_out:
        if command == "compress":
            return processor.compress(bit_in, bit_out)
        return processor.decompress(bit_in, bit_out)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = HuffConfig.from_env() if args.debug is None else HuffConfig(debug=args.debug)

    try:
        result = run(args.command, args.src, args.dst, config)
    except OSError as e:
        logger.error("%s: %s", args.command, e)
        return 1

    if not result.ok:
        # dst is left in place; it holds whatever was decoded before the failure
        logger.error("%s failed (%s): %s", args.command, result.kind.value, result.error)
        return 1

    logger.info(
        "%s %s -> %s: %d bits in, %d bits out",
        args.command, args.src, args.dst, result.bits_read, result.bits_written,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
