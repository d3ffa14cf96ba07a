import sys

from scriptree.cli import main

sys.exit(main())
