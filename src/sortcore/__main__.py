import sys

from .display import main

sys.exit(main())
