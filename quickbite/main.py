"""Entry point for the QuickBite Textual app."""

from __future__ import annotations

from quickbite.logging_setup import setup_logging
from quickbite.storefront_app import QuickBiteApp


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    QuickBiteApp().run()


if __name__ == "__main__":
    main()
