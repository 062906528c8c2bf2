"""Allow ``python -m foundry_markup``."""
import sys

from foundry_markup.cli._dispatcher import main

sys.exit(main())
