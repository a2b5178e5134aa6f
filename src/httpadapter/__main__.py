"""Allow ``python -m httpadapter``."""

from .cli import main

main()
