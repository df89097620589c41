import sys

from src.max_product.demo import main

sys.exit(main())
