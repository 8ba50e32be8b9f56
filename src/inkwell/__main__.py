"""Allow ``python -m inkwell``."""

from inkwell.cli.main import run

if __name__ == "__main__":
    run()
