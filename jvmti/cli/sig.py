""" Parse java type signatures and print them in java syntax.
"""

import argparse
import logging
from .base import base_parser, LogSetup
from ..printer import format_type, print_type
from ..signature import parse_signature_strict, LONG_CODES


parser = argparse.ArgumentParser(description=__doc__, parents=[base_parser])
parser.add_argument(
    "signatures",
    metavar="signature",
    nargs="+",
    help="type signature, for example [Ljava/lang/String;",
)
parser.add_argument(
    "--long-code",
    choices=LONG_CODES,
    default="L",
    help="character which denotes the long type (default: %(default)s)",
)
parser.add_argument(
    "--dump",
    action="store_true",
    default=False,
    help="print the structure of each type",
)


def sig(args=None):
    """ Type signature command line utility. """
    args = parser.parse_args(args)
    with LogSetup(args):
        logger = logging.getLogger("jvmti.sig")
        for signature in args.signatures:
            logger.debug("Parsing %r", signature)
            java_type = parse_signature_strict(
                signature, long_code=args.long_code
            )
            print("{}: {}".format(signature, format_type(java_type)))
            if args.dump:
                print_type(java_type)


if __name__ == "__main__":
    sig()
