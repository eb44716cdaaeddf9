"""Entry point for ``python -m yamlhtml``."""

from yamlhtml.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
