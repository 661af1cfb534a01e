import sys

from termfolio.build import main

sys.exit(main())
