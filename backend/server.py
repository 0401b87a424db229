"""Run the Drive API with uvicorn.

Run standalone: python server.py --addr :4443 --cert cert.pem --key key.pem
TLS is enabled only when both a certificate and a key are given.
"""

import argparse

import uvicorn

from config import ADDR, CERT_FILE, CERT_KEY


def parse_addr(addr: str) -> tuple[str, int]:
    """Split 'host:port' into its parts; an empty host means all interfaces."""
    host, _, port = addr.rpartition(":")
    if not port.isdigit():
        raise ValueError(f"invalid address {addr!r}, expected host:port")
    return host or "0.0.0.0", int(port)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Drive file store server")
    parser.add_argument("--addr", default=ADDR, help="web server address")
    parser.add_argument("--cert", default=CERT_FILE, help="path of TLS certificate file")
    parser.add_argument("--key", default=CERT_KEY, help="path of TLS private key file")
    args = parser.parse_args(argv)

    host, port = parse_addr(args.addr)
    tls = {}
    if args.cert and args.key:
        tls = {"ssl_certfile": args.cert, "ssl_keyfile": args.key}

    uvicorn.run("main:app", host=host, port=port, **tls)


if __name__ == "__main__":
    main()
