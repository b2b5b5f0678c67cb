"""
Command-line interface for issuing delegations, signing, and verifying proxy
signatures. Scalars are exchanged as hex strings, points as SEC 1 hex, and
delegations as JSON objects.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional
from .delegation import Delegation, check_identity, issue_delegation
from .keys import generate_keypair
from .point import Point
from .signer import derive_signing_key, sign_message
from .verifier import check_signature

logger = logging.getLogger(__name__)


def _scalar(value: str) -> int:
    try:
        return int(value, 16)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid hex scalar: {value!r}") from e


def _point(value: str) -> Point:
    try:
        return Point.sec_deserialize(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid public key: {e}") from e


def _delegation(value: str) -> Delegation:
    try:
        return Delegation.from_dict(json.loads(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid delegation: {e}") from e


def _hex(scalar: int) -> str:
    return scalar.to_bytes(32, "big").hex()


def _report(valid: bool) -> int:
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def keygen(args) -> int:
    private_key, public = generate_keypair()
    print(
        json.dumps(
            {
                "private_key": _hex(private_key),
                "public_key": public.sec_serialize().hex(),
            }
        )
    )
    return 0


def delegate(args) -> int:
    delegation = issue_delegation(args.private_key, args.weight)
    print(json.dumps(delegation.to_dict()))
    return 0


def identity(args) -> int:
    return _report(check_identity(args.delegation, args.public_key))


def sign(args) -> int:
    signing_key = derive_signing_key(args.private_key, args.delegation)
    signed = sign_message(args.message.encode(), signing_key, args.private_key)
    logger.debug(
        "Signed message under delegation with weight %d", args.delegation.weight
    )
    print(json.dumps({"signature": _hex(signed)}))
    return 0


def verify(args) -> int:
    return _report(
        check_signature(
            args.message.encode(),
            args.proxy_public_key,
            args.original_public_key,
            args.signature,
            args.delegation.warrant_point,
            args.delegation.weight,
        )
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proxysig", description="Warrant-based proxy signatures over P-256."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers()

    parser_keygen = subparsers.add_parser("keygen", help="Generate a key pair.")
    parser_keygen.set_defaults(func=keygen)

    parser_delegate = subparsers.add_parser(
        "delegate", help="Issue a delegation as the original signer."
    )
    parser_delegate.add_argument(
        "--private-key", type=_scalar, required=True, help="Original signer private key."
    )
    parser_delegate.add_argument(
        "--weight", type=int, required=True, help="Permission weight."
    )
    parser_delegate.set_defaults(func=delegate)

    parser_identity = subparsers.add_parser(
        "check-identity", help="Check a delegation against the original signer."
    )
    parser_identity.add_argument(
        "--delegation", type=_delegation, required=True, help="Delegation JSON."
    )
    parser_identity.add_argument(
        "--public-key", type=_point, required=True, help="Original signer public key."
    )
    parser_identity.set_defaults(func=identity)

    parser_sign = subparsers.add_parser("sign", help="Sign a message as the proxy.")
    parser_sign.add_argument("--message", type=str, required=True, help="Message to sign.")
    parser_sign.add_argument(
        "--private-key", type=_scalar, required=True, help="Proxy signer private key."
    )
    parser_sign.add_argument(
        "--delegation", type=_delegation, required=True, help="Delegation JSON."
    )
    parser_sign.set_defaults(func=sign)

    parser_verify = subparsers.add_parser("verify", help="Verify a proxy signature.")
    parser_verify.add_argument(
        "--message", type=str, required=True, help="Message to verify."
    )
    parser_verify.add_argument(
        "--proxy-public-key", type=_point, required=True, help="Proxy signer public key."
    )
    parser_verify.add_argument(
        "--original-public-key",
        type=_point,
        required=True,
        help="Original signer public key.",
    )
    parser_verify.add_argument(
        "--signature", type=_scalar, required=True, help="Signature scalar."
    )
    parser_verify.add_argument(
        "--delegation", type=_delegation, required=True, help="Delegation JSON."
    )
    parser_verify.set_defaults(func=verify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
