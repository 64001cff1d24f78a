import sys

from progression.runner import main

sys.exit(main())
