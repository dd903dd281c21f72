import logging

from .demo import main

logging.basicConfig(level=logging.INFO)
raise SystemExit(main())
