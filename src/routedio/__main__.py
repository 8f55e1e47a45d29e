"""Allow running routed-io with ``python -m routedio``."""

from .cli import main

if __name__ == "__main__":
    main()
