import sys

from src.composer.cli import main

sys.exit(main())
