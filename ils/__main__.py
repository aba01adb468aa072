"""Module entrypoint for ``python -m ils``.

All argument parsing and setup happen in ``ils.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
