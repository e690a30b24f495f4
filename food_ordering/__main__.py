"""Run the ordering terminal with ``python -m food_ordering``."""
from food_ordering.cli import main

if __name__ == "__main__":
    main()
