import sys

from create_skills.cli import main

if __name__ == "__main__":
    sys.exit(main())
