"""Allow ``python -m speckit_feature``."""

from speckit_feature.cli import main

if __name__ == "__main__":
    main()
