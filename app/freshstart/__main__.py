"""Allow running freshstart as ``python -m freshstart``."""

from freshstart.cli.main import app

if __name__ == "__main__":
    app()
