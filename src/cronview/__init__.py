# SPDX-License-Identifier: MIT

from cronview.cleanup import register_cleanup
from cronview.initialize import initialize
from cronview.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
