import sys

from string_calculator.main import main

sys.exit(main())
