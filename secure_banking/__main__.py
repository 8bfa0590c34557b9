"""Allow ``python -m secure_banking``"""

from .cli import main

if __name__ == "__main__":
    main()
