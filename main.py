import sys

from services.temperament_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())
