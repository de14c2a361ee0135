"""Allow ``python -m backend_forge``."""

from backend_forge.cli import main

main()
