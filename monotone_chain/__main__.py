import sys

from monotone_chain.cli import main


if __name__ == '__main__':
    sys.exit(main())
