"""Package entry point for ``python -m framburdur``.

WHY: Users run the approximator as ``python -m framburdur`` for the
interactive prompt, or ``python -m framburdur Reykjavík`` for one-shot use.

HOW: Delegates straight to the CLI's main() function.
"""

from framburdur.cli import main

if __name__ == "__main__":
    main()
