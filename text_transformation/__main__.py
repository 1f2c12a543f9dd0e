import sys

from text_transformation.cli import main

sys.exit(main())
