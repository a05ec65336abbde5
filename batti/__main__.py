import sys

from batti.main import main

sys.exit(main())
