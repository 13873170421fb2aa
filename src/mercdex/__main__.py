"""Allow running Mercdex with ``python -m mercdex``."""

from mercdex.main import run

if __name__ == "__main__":
    run()
