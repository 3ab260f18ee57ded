import sys

from clickstack.cli import main

sys.exit(main())
