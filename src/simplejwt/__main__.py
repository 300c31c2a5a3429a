"""Entry point: python -m simplejwt <command>"""

from simplejwt.cli import main

if __name__ == "__main__":
    main()
