#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "0.1.0"

from argparse import ArgumentParser
from mchip import main
from mchip.constants import CORE_EXTENSIONS


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument(
        "filename", nargs="?",
        help="program image to execute (normally ending in .ch8).  The bundled IBM logo image is used if omitted"
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pbm", "pygame", "null"], default="pbm",
        help="set the output for the final screen: a PBM bitmap (default), a PyGame window, or nothing"
    )
    parser.add_argument(
        "-o", "--output",
        help="write the PBM bitmap to this file instead of stdout"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 512)"
    )
    parser.add_argument(
        "--pygame_palette",
        help="redefine the background and foreground colours for the PyGame renderer in hex, e.g. 000000,FFFFFF"
    )
    parser.add_argument(
        "--stop_address",
        help="stop once the program counter reaches this address (default 0x228).  'none' runs until a fault"
    )

    for core_extension in CORE_EXTENSIONS:
        parser.add_argument(
            "--{}_ext".format(core_extension), type=int, choices=[0, 1], default=0,
            help="enable general-purpose {} behaviour (off by default)".format(core_extension.replace("_", " "))
        )

    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output on stderr.  Shows every instruction executed"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def run():
    main(vars(parse_args()))


if __name__ == "__main__":
    # It is possible to start the core from another program by calling main with a dictionary
    run()
