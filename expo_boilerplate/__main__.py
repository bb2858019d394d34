"""Allow ``python -m expo_boilerplate``."""

from expo_boilerplate.pipeline import main

main()
