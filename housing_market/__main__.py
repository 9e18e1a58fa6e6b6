import sys

from housing_market.cli import main

sys.exit(main())
