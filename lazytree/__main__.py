"""Module entrypoint for ``python -m lazytree``.

All argument parsing and output happen in ``lazytree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
