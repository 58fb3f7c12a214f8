# SPDX-License-Identifier: MIT

from hourbook.cleanup import register_cleanup
from hourbook.initialize import initialize
from hourbook.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
