# SPDX-License-Identifier: MIT

from commscal.initialize import initialize
from commscal.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
