"""Allow running as ``python -m mosdl``."""

from mosdl.cli import main

main()
