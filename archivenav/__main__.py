"""Module entrypoint for ``python -m archivenav``.

Argument parsing and session setup happen in ``archivenav.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
