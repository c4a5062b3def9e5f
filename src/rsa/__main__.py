import sys

from src.rsa.cli import main

sys.exit(main())
