"""Allow ``python -m space_agent``."""

from .main import main

main()
