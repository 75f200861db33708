"""Allow ``python -m coloursum``."""

from coloursum.main import main

main()
