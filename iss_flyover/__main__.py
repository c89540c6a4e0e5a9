"""Allow ``python -m iss_flyover``."""

from iss_flyover.cli import main

main()
