import sys

from ngramkit.cli import main

sys.exit(main())
