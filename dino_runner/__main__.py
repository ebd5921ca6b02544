import sys

from dino_runner.main import main

sys.exit(main())
