import sys

from pathexpand.expandPath import main

sys.exit(main())
