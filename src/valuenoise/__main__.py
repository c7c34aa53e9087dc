"""Allow running as ``python -m valuenoise``."""

from .cli import main

main()
