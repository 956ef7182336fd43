"""Entry point for the bone renamer.

Executing ``python -m bone_renamer`` forwards to the CLI defined in
``bone_renamer.cli``.
"""
from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
