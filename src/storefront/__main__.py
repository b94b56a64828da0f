"""Allow ``python -m storefront``."""

from storefront.cli import cli

cli()
