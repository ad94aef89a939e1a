import sys

from outlook.cli import main

sys.exit(main())
