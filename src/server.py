"""Protean Engine runner for the storefront domain.

In production the storefront processes events asynchronously (see the
``production`` overlay in storefront/domain.toml); the Engine delivers
VendorReviewApproved to the vendor rating handler and the ShopperVisit
events to the activity recorder.

Usage:
    PROTEAN_ENV=production python src/server.py
"""

import argparse

from protean.server.engine import Engine

from storefront.utils.logging import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Storefront Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    configure_logging()

    from storefront.domain import storefront

    storefront.init()
    Engine(storefront, test_mode=args.test_mode).run()


if __name__ == "__main__":
    main()
