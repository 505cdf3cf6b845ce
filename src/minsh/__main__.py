"""minsh CLI bootstrap."""

from minsh.cli.app import main

if __name__ == "__main__":
    main()
