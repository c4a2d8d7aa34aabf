"""Package entry point for ``python -m datavyu_converter``.

WHY: Lab members run the converter from the folder that holds the
``Input/`` and ``Output/`` directories, without installing a console script.

HOW: Delegates to the CLI's main() function.
"""

from datavyu_converter.cli import main

if __name__ == "__main__":
    main()
