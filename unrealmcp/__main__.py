"""Allow ``python -m unrealmcp``."""

from .interface.main import main

main()
